"""Domain layer: value objects, exceptions, ports. No dependencies on outer layers."""
