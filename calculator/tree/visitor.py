from typing import List, Tuple

from calculator.tree.tree import Node


class NodeVisitor:
    """
    For visiting nodes in our AST
    """

    def visit(self, node: Node, *args, **kwargs):
        """Visit a node."""
        method = "visit_" + node.__class__.__name__
        visitor = getattr(self, method, self.visit_unknown)
        return visitor(node, *args, **kwargs)

    def visit_unknown(self, node: Node, *args, **kwargs):
        """Called if no explicit visitor function exists for a node."""
        raise NotImplementedError(
            f"{self.__class__.__name__} has no visitor for {node.__class__.__name__}."
        )


class PostOrderVisitor(NodeVisitor):
    """
    For reducing our AST bottom-up. Each `visit_<Node>` method receives the node
    followed by the results of visiting its children, in field order.

    The traversal uses an explicit stack rather than recursion, so that a long
    chain such as `1 + 1 + ... + 1` does not exhaust the Python call stack.
    """

    def reduce(self, tree: Node):
        results = []
        stack: List[Tuple[Node, bool]] = [(tree, False)]
        while stack:
            node, expanded = stack.pop()
            children = [child for _, child in node.iter_fields()]
            if expanded or not children:
                # The results of the children are the last ones on the stack
                start = len(results) - len(children)
                operands = results[start:]
                del results[start:]
                results.append(self.visit(node, *operands))
            else:
                stack.append((node, True))
                # Reversed, so that the leftmost child is reduced first
                stack.extend((child, False) for child in reversed(children))
        return results.pop()
