"""UMI adjacency graph and connected-component labelling."""

from collections.abc import Sequence

from umidedupe.clustering.distance import get_edit_distance

__all__ = ["build_adjacency", "label_components"]


def build_adjacency(umis: Sequence[str], max_edit_distance: int) -> list[list[int]]:
    """Build the adjacency list linking UMIs within ``max_edit_distance``.

    Every ordered pair is compared, so each node also lists itself.

    Parameters
    ----------
    umis : Sequence[str]
        Distinct UMIs; list position is the node index.
    max_edit_distance : int
        Largest Hamming distance at which two UMIs are linked.

    Returns
    -------
    list[list[int]]
        For each node, the indices of the nodes it is linked to.
    """
    adjacency: list[list[int]] = []
    for umi_a in umis:
        adjacency.append(
            [
                index_b
                for index_b, umi_b in enumerate(umis)
                if get_edit_distance(umi_a, umi_b) <= max_edit_distance
            ]
        )
    return adjacency


def label_components(adjacency: Sequence[Sequence[int]]) -> tuple[list[int], int]:
    """Label connected components by depth-first traversal.

    Nodes are scanned in index order; each unlabelled node seeds a new
    component and every node reachable from it receives the same label.

    Parameters
    ----------
    adjacency : Sequence[Sequence[int]]
        Adjacency list as returned by :func:`build_adjacency`.

    Returns
    -------
    tuple[list[int], int]
        Component label per node (1-based) and the number of components.
    """
    labels = [0] * len(adjacency)
    n_components = 0

    for seed in range(len(adjacency)):
        if labels[seed]:
            continue

        n_components += 1
        labels[seed] = n_components
        stack = [seed]
        while stack:
            node = stack.pop()
            for neighbour in adjacency[node]:
                if not labels[neighbour]:
                    labels[neighbour] = n_components
                    stack.append(neighbour)

    return labels, n_components
