from officeops.setup.ioc.container import AppProvider, create_container, verify_wiring

__all__ = [
    "AppProvider",
    "create_container",
    "verify_wiring",
]
