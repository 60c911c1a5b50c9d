"""Built-in ``basicguard`` sub-commands (``check``, ``encode``)."""
