# appointment_booking/infrastructure/di_container.py
"""Service container exposing the API mapper singletons."""
from __future__ import annotations

from functools import lru_cache
import inspect
from typing import Any, Callable, Dict, Type

from appointment_booking.infrastructure.mappers import (
    AppointmentApiMapper,
    TreatmentApiMapper,
    verify_status_coverage,
)
from appointment_booking.logging_setup import REGISTRY_TAG, get_logger

log = get_logger(REGISTRY_TAG)

ServiceType = Type[Any]
Factory = Callable[["Container"], Any]


class Container:
    """Minimal service container supporting factories and instances."""

    def __init__(self) -> None:
        self._factories: Dict[ServiceType, Factory] = {}
        self._instances: Dict[ServiceType, Any] = {}

    def register(
        self,
        service: ServiceType,
        *,
        factory: Factory | None = None,
        instance: Any | None = None,
    ) -> None:
        if instance is not None:
            self._instances[service] = instance
            self._factories.pop(service, None)
            return
        if factory is None:
            raise ValueError("Either factory or instance must be provided.")
        self._factories[service] = factory
        self._instances.pop(service, None)

    def resolve(self, service: ServiceType) -> Any:
        if service in self._instances:
            return self._instances[service]
        try:
            factory = self._factories[service]
        except KeyError as exc:
            raise KeyError(f"No provider registered for {service!r}") from exc
        return factory(self)


def _register_defaults(container: Container) -> None:
    """Register the mapper singletons with the container."""
    verify_status_coverage()
    container.register(AppointmentApiMapper, instance=AppointmentApiMapper())
    container.register(TreatmentApiMapper, instance=TreatmentApiMapper())
    log.info("Registered API mappers: AppointmentApiMapper, TreatmentApiMapper")


def _wrap_override(provider: Any) -> Factory:
    if inspect.isfunction(provider) or inspect.ismethod(provider):
        signature = inspect.signature(provider)
        if len(signature.parameters) == 0:
            return lambda _c, fn=provider: fn()
        return lambda c, fn=provider: fn(c)
    if isinstance(provider, type):
        return lambda _c, cls=provider: cls()
    return lambda _c, value=provider: value


def build_container(overrides: Dict[ServiceType, Any] | None = None) -> Container:
    """Create a new container with optional dependency overrides."""
    container = Container()
    _register_defaults(container)

    if overrides:
        for service, provider in overrides.items():
            factory = _wrap_override(provider)
            if isinstance(provider, type) or inspect.isfunction(provider) or inspect.ismethod(provider):
                container.register(service, factory=factory)
            else:
                container.register(service, instance=factory(container))

    return container


@lru_cache(maxsize=1)
def get_container() -> Container:
    """Return a cached container instance for application use."""
    return build_container()


def get_appointment_mapper() -> AppointmentApiMapper:
    return get_container().resolve(AppointmentApiMapper)


def get_treatment_mapper() -> TreatmentApiMapper:
    return get_container().resolve(TreatmentApiMapper)


__all__ = [
    "Container",
    "build_container",
    "get_appointment_mapper",
    "get_container",
    "get_treatment_mapper",
]
