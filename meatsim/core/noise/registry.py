registry = {}


def register(config_cls):
    """Bind a noise source class to the config class that selects it."""

    def decorator(cls):
        existing = registry.get(config_cls.__name__)
        if existing is not None and existing is not cls:
            raise ValueError(
                f"Noise config '{config_cls.__name__}' already registered to {existing.__name__}."
            )
        registry[config_cls.__name__] = cls
        return cls

    return decorator
