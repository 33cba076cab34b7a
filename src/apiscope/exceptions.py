class APIScopeError(Exception):
    """Represent a base class for all apiscope-specific failures.

    The scoped-execution protocol itself never raises these: failures coming
    from ``create()``, ``release()`` or a unit of work propagate unchanged.
    Only configuration and facade wiring raise ``APIScopeError`` subclasses.
    """


class APIScopeInvalidStorageModeError(APIScopeError):
    """Signal an unknown slot storage mode passed to a manager.

    Raised by ``APIManager.__init__`` when ``storage_mode`` is neither a
    ``StorageMode`` member nor one of its string values.

    Typical fix is passing ``StorageMode.THREAD``/``"thread"`` or
    ``StorageMode.CONTEXT``/``"context"``.
    """


class APIScopeManagerNotSetError(APIScopeError):
    """Signal use of an ``APIFacade`` subclass that has no manager bound.

    Raised by every facade classmethod when the subclass did not assign the
    ``manager`` class attribute.

    Typical fix is declaring ``manager = FactoryAPIManager(MyDefaultAPI)`` in
    the facade class body.
    """


class APIScopeAsyncStorageModeError(APIScopeError):
    """Signal an async scoped call on a manager using thread storage.

    Raised by ``APIManager.acall_scoped`` when the manager was built with
    ``StorageMode.THREAD``. Tasks on one thread share that slot, so their
    overrides could not be restored reliably.

    Typical fix is building the manager with ``storage_mode="context"``.
    """
