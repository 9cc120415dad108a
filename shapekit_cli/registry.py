"""
ShapeRegistry - Explicit shape-kind registration pattern

Bounded Context: Turning untyped shape descriptions into shape objects
Responsibilities:
  - Register shape kinds with their constructors
  - Validate kind existence before construction
  - Provide introspection (available_kinds, get_help)

This is the boundary where shapes originate from untyped input (YAML), so
every kind is checked here rather than assumed.

Pattern: Registry with explicit registration
"""

from typing import Any, Callable, Dict, Mapping, Optional, Set

from shapekit_calculator.errors import ShapekitError
from shapekit_geometry import (
    AreaCapable,
    Circle,
    Cuboid,
    Polygon,
    Rectangle,
    Sphere,
    Square,
)

ShapeFactory = Callable[..., AreaCapable]


class ShapeNotAvailableError(ShapekitError):
    """Raised when attempting to build an unregistered shape kind"""
    pass


class ShapeRegistry:
    """
    Registry for shape kinds with explicit registration.

    Key Features:
      - Fail-fast: Unknown kinds rejected immediately
      - Introspection: Can query available kinds at runtime
      - Self-Documenting: Each kind has a description

    Example:
        registry = ShapeRegistry()
        registry.register('square', Square, "Square with edge 'length'")

        try:
            shape = registry.create('square', {'length': 5})
        except ShapeNotAvailableError as e:
            print(f"Shape not available: {e}")
    """

    def __init__(self):
        self._factories: Dict[str, ShapeFactory] = {}
        self._descriptions: Dict[str, str] = {}

    def register(self, kind: str, factory: ShapeFactory, description: str) -> None:
        """
        Register a shape kind with its constructor.

        Args:
            kind: Kind name (lowercase, no spaces)
            factory: Callable taking the shape's parameters as keywords
            description: Human-readable description for help text

        Raises:
            ValueError: If kind already registered (double registration)
        """
        if kind in self._factories:
            raise ValueError(f"Shape kind '{kind}' already registered")

        self._factories[kind] = factory
        self._descriptions[kind] = description

    def create(self, kind: str, params: Optional[Mapping[str, Any]] = None) -> AreaCapable:
        """
        Build a shape of a registered kind.

        Args:
            kind: Kind name to build
            params: Keyword parameters for the kind's constructor

        Returns:
            New shape instance

        Raises:
            ShapeNotAvailableError: If kind not registered
            ValueError: If parameters are missing, unexpected or invalid
        """
        if kind not in self._factories:
            raise ShapeNotAvailableError(
                f"Shape kind '{kind}' not available. "
                f"Available kinds: {', '.join(sorted(self.available_kinds))}"
            )

        factory = self._factories[kind]
        try:
            return factory(**dict(params or {}))
        except TypeError as e:
            raise ValueError(f"Invalid parameters for shape '{kind}': {e}") from e

    def is_available(self, kind: str) -> bool:
        """Check if kind is registered."""
        return kind in self._factories

    @property
    def available_kinds(self) -> Set[str]:
        """Snapshot of all registered kinds."""
        return set(self._factories.keys())

    def get_help(self) -> Dict[str, str]:
        """Copy of kind -> description."""
        return dict(self._descriptions)

    def count(self) -> int:
        return len(self._factories)


def default_registry() -> ShapeRegistry:
    """
    Registry with every built-in shape kind.

    Returns:
        New ShapeRegistry (callers may register additional kinds)
    """
    registry = ShapeRegistry()
    registry.register('square', Square, "Square with edge 'length'")
    registry.register('rectangle', Rectangle, "Rectangle with 'width' and 'height'")
    registry.register('circle', Circle, "Circle with 'radius'")
    registry.register(
        'polygon',
        lambda vertices: Polygon.from_points(vertices),
        "Simple polygon from 'vertices' ([[x, y], ...], at least 3)"
    )
    registry.register(
        'cuboid', Cuboid, "Cuboid with 'length', 'width' and 'height' (has volume)"
    )
    registry.register('sphere', Sphere, "Sphere with 'radius' (has volume)")
    return registry
