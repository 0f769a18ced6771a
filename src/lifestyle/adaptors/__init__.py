from .backend_adaptor import BackendAdaptor, BackendError

__all__ = [
    "BackendAdaptor",
    "BackendError",
]
