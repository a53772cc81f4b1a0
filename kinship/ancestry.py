"""Royal ancestry chains.

A chain is a list of people ordered leaf to root: index 0 is the subject and
index ``i`` is the royal ancestor ``i`` generations above them.
"""

from __future__ import annotations

import logging

from .errors import InconsistentDataError
from .models import Person
from .store import PersonStore

log = logging.getLogger(__name__)


def _next_royal_parent(store: PersonStore, person: Person) -> Person | None:
    # First royal parent in stored link order wins; any other royal parent is ignored.
    for link in person.parents:
        # Re-fetch by id rather than holding parent objects on the child.
        parent = store.find_by_id(link.parent_id)
        if parent is None:
            log.error("person %s references missing parent %s", person.id, link.parent_id)
            raise InconsistentDataError(
                f"parent {link.parent_id} of person {person.id} ({person.name}) does not exist"
            )
        if parent.is_royal:
            return parent
    return None


def trace_royal_ancestry(store: PersonStore, person: Person) -> list[Person]:
    """Return the royal ancestry of *person*, starting with the person themself."""

    if person is None:
        raise ValueError("person is required")

    chain: list[Person] = []
    ancestor: Person | None = person
    while ancestor is not None:
        chain.append(ancestor)
        ancestor = _next_royal_parent(store, ancestor)

    log.debug("royal ancestry of %s: %s", person.name, [p.name for p in chain])
    return chain


def remove_common_ancestry(
    chain_a: list[Person], chain_b: list[Person]
) -> tuple[list[Person], list[Person]]:
    """Cut both chains down so they end at their nearest common ancestor.

    Chains are compared root first. Both chains are assumed to share a single
    root, so the scan stops at the first divergence. If the roots differ the
    chains come back unchanged.
    """

    if chain_a is None or chain_b is None:
        raise ValueError("both ancestry chains are required")

    root_first_a = list(reversed(chain_a))
    root_first_b = list(reversed(chain_b))

    common = 0
    for i in range(min(len(root_first_a), len(root_first_b))):
        if root_first_a[i].id != root_first_b[i].id:
            break
        common = i

    # Keep the nearest shared ancestor as the new root of both chains.
    reduced_a = list(reversed(root_first_a[common:]))
    reduced_b = list(reversed(root_first_b[common:]))
    return reduced_a, reduced_b
