"""Facet and collapse option records for search requests."""

from dataclasses import dataclass

from oss_client.search.encoding import is_blank, to_int


@dataclass
class FacetOptions:
    """Options of a single facet.

    Attributes:
        min: Minimum document count for a bucket to be returned
        multi: Request a multi-valued facet
        multi_collapse: Request a multi-valued facet computed on collapsed results
    """

    min: int | None = None
    multi: bool = False
    multi_collapse: bool = False

    def fragment(self, field: str) -> str:
        """Render the facet parameter for ``field``, e.g. ``facet=category(5)``."""
        if self.multi:
            name = "facet.multi"
        elif self.multi_collapse:
            name = "facet.multi.collapse"
        else:
            name = "facet"
        fragment = f"{name}={field}"
        if self.min is not None:
            fragment += f"({self.min})"
        return fragment


@dataclass
class CollapseOptions:
    """Field collapsing configuration; every attribute is independently optional."""

    field: str | None = None
    max: int | None = None
    mode: str | None = None
    type: str | None = None

    def fragments(self) -> list[str]:
        """Render the configured collapse parameters.

        Order is fixed: field, type, mode, max. ``field`` and ``type`` are
        skipped when empty or "0"; ``mode`` and ``max`` only when unset, so
        ``collapse.max=0`` is emitted.
        """
        fragments = []
        if not is_blank(self.field):
            fragments.append(f"collapse.field={self.field}")
        if not is_blank(self.type):
            fragments.append(f"collapse.type={self.type}")
        if self.mode is not None:
            fragments.append(f"collapse.mode={self.mode}")
        if self.max is not None:
            fragments.append(f"collapse.max={to_int(self.max)}")
        return fragments
