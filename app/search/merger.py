from typing import List

from .scanner import SearchableItem


def merge_results(
    packages: List[SearchableItem],
    plugins: List[SearchableItem],
    categories: List[SearchableItem],
) -> List[SearchableItem]:
    """
    Combine the per-catalog lists into one ranking, highest score first.

    Ties keep concatenation order (packages, plugins, categories) because
    ``sorted`` is stable. The merged list is not capped again.
    """
    combined = [*packages, *plugins, *categories]
    return sorted(combined, key=lambda item: item.score, reverse=True)
