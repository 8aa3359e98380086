"""Data model for nested scales: pans, side references and the owning collection."""

from dataclasses import dataclass, field


class MissingScaleError(LookupError):
    """A side references a scale that is not in the collection."""


@dataclass
class Pan:
    """A weighing pan holding a fixed load plus a computed counterweight"""
    mass: int = 0
    balance_mass: int = 0


@dataclass(frozen=True)
class ScaleRef:
    """Non-owning handle to another scale, resolved by name through a ScaleCollection"""
    name: str


Side = Pan | ScaleRef

DEFAULT_SCALE_SELF_MASS = 1


@dataclass
class Scale:
    """A named scale with two sides.

    The scale's own pan is how it behaves when a parent scale references it:
    its mass starts at the scale's self-mass and accumulates everything the
    scale carries once it has been balanced.
    """
    name: str
    pan: Pan = field(default_factory=lambda: Pan(mass=DEFAULT_SCALE_SELF_MASS))
    left: Side = field(default_factory=Pan)
    right: Side = field(default_factory=Pan)

    @property
    def mass(self) -> int:
        return self.pan.mass

    @property
    def balance_mass(self) -> int:
        return self.pan.balance_mass

    def sides(self) -> tuple[Side, Side]:
        return self.left, self.right


class ScaleCollection:
    """Insertion-ordered owner of every scale in one computation.

    Scales are keyed by name and kept in first-mention order, whether that
    mention was the scale's own defining record or a reference from another
    scale's side.
    """

    def __init__(self, self_mass: int = DEFAULT_SCALE_SELF_MASS):
        """Create an empty collection.

        Args:
            self_mass: starting mass given to every scale this collection creates
        """
        self.self_mass = self_mass
        self._scales: dict[str, Scale] = {}

    def get_or_create(self, name: str) -> Scale:
        """Return the scale called name, creating it at the end of the order if new.

        Precondition:
            name is a non-empty string

        Postcondition:
            exactly one Scale exists for name
            a newly created scale has two empty pans and pan.mass == self_mass
        """
        scale = self._scales.get(name)
        if scale is None:
            scale = Scale(name, pan=Pan(mass=self.self_mass))
            self._scales[name] = scale
        return scale

    def resolve(self, side: Side) -> Pan:
        """Resolve a side to the live Pan it stands for.

        Precondition:
            side is a Pan or a ScaleRef

        Postcondition:
            a Pan side is returned as is
            a ScaleRef side returns the referenced scale's own pan (not a copy)

        Raises:
            MissingScaleError: if a ScaleRef names a scale not in this collection
        """
        if isinstance(side, Pan):
            return side
        try:
            return self._scales[side.name].pan
        except KeyError as exc:
            raise MissingScaleError(f"Scale '{side.name}' is referenced but does not exist") from exc

    def references(self, scale: Scale) -> list[str]:
        """Names of the scales referenced by scale's sides, left first."""
        return [side.name for side in scale.sides() if isinstance(side, ScaleRef)]

    def names(self) -> list[str]:
        return list(self._scales)

    def __getitem__(self, name: str) -> Scale:
        return self._scales[name]

    def __contains__(self, name: object) -> bool:
        return name in self._scales

    def __iter__(self):
        return iter(self._scales.values())

    def __reversed__(self):
        return reversed(list(self._scales.values()))

    def __len__(self) -> int:
        return len(self._scales)
