"""Redis client that works the same with a single server or a cluster."""