# Package Lookup — resolve a client's package reference to one package
# The fallback order is an explicit tuple of named strategies; the result
# says which strategy matched so callers can log or reject weak matches.

from typing import Callable, Dict, NamedTuple, Optional, Sequence
from models.schemas import StoredPackage

DEFAULT_LOOKUP_ORDER = ("id", "name", "first_enabled")


class LookupResult(NamedTuple):
    strategy: Optional[str]
    package:  Optional[StoredPackage]


def _by_id(packages: Sequence[StoredPackage], ref: str) -> Optional[StoredPackage]:
    return next((p for p in packages if p.id == ref), None)


def _by_name(packages: Sequence[StoredPackage], ref: str) -> Optional[StoredPackage]:
    """Matches the package name, the host's custom name or the slug."""
    return next(
        (p for p in packages if ref in (p.name, p.custom_name, p.slug)),
        None
    )


def _first_enabled(packages: Sequence[StoredPackage], ref: str) -> Optional[StoredPackage]:
    return next((p for p in packages if p.is_enabled), None)


STRATEGIES: Dict[str, Callable[[Sequence[StoredPackage], str], Optional[StoredPackage]]] = {
    "id":            _by_id,
    "name":          _by_name,
    "first_enabled": _first_enabled,
}


def resolve_package(
    packages: Sequence[StoredPackage],
    ref:      str,
    order:    Sequence[str] = DEFAULT_LOOKUP_ORDER
) -> LookupResult:
    unknown = [name for name in order if name not in STRATEGIES]
    if unknown:
        raise ValueError(f"Unknown lookup strategies: {', '.join(unknown)}")

    for name in order:
        pkg = STRATEGIES[name](packages, ref)
        if pkg is not None:
            return LookupResult(name, pkg)
    return LookupResult(None, None)
