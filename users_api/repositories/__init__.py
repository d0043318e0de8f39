# Repositories package.
#
# Raw MongoDB operations, one module per collection.  Functions take the
# AsyncIOMotorDatabase handed out by ``get_db`` as their first argument and
# return plain documents; serialisation happens in the service layer.
