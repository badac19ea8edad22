"""Leaf counting in a rooted tree after cutting off a subtree."""


def leaves_after_removal(parents, removed):
    """Count the leaves left once node ``removed`` and its subtree are cut off.

    ``parents[i]`` is the parent of node ``i``, with -1 marking the root.
    A node whose children have all been cut off becomes a leaf.
    """
    size = len(parents)
    if not 0 <= removed < size:
        raise IndexError(f"node {removed} out of range")
    roots = [node for node, parent in enumerate(parents) if parent == -1]
    if len(roots) != 1:
        raise ValueError("the tree must have exactly one root")
    children = [[] for _ in range(size)]
    for node, parent in enumerate(parents):
        if parent == -1:
            continue
        if not 0 <= parent < size:
            raise ValueError(f"parent {parent} of node {node} out of range")
        if node != removed:
            children[parent].append(node)
    root = roots[0]
    if root == removed:
        return 0
    leaves = 0
    stack = [root]
    seen = set()
    while stack:
        node = stack.pop()
        if node in seen:
            raise ValueError("parent links contain a cycle")
        seen.add(node)
        if children[node]:
            stack.extend(children[node])
        else:
            leaves += 1
    return leaves