"""Cloths made by sewing other cloths together."""

from __future__ import annotations

from typing import Iterable

from clothsim.cloth import Cloth
from clothsim.vector import SEAM_DELTA, SEAM_K


class ComposedCloth(Cloth):
    """A cloth that takes over the masses and springs of other cloths and sews them."""

    def __init__(
        self,
        cloths: Cloth | Iterable[Cloth],
        k: float = SEAM_K,
        delta: float = SEAM_DELTA,
    ) -> None:
        super().__init__()
        parts = [cloths] if isinstance(cloths, Cloth) else list(cloths)
        for cloth in parts:
            self.add_cloth(cloth, k, delta)

    def add_cloth(self, cloth: Cloth, k: float = SEAM_K, delta: float = SEAM_DELTA) -> None:
        """Take over a cloth, linking its masses to ours that lie closer than delta."""
        self.springs.extend(cloth._release_springs())
        for mine in self.masses:
            for theirs in cloth.masses:
                distance = (mine.position - theirs.position).norm()
                if distance < delta:
                    self.connect(mine, theirs, k, distance)
        self.masses.extend(cloth.masses)

    def __iadd__(self, cloth: Cloth) -> ComposedCloth:
        self.add_cloth(cloth)
        return self