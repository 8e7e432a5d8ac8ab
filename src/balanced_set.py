from typing import TypeVar, Generic, List, Iterator, Optional, Any, Protocol


class Comparable(Protocol):
    def __lt__(self, other: Any) -> bool: ...

    def __gt__(self, other: Any) -> bool: ...


T = TypeVar('T', bound=Comparable)


class EmptyTreeError(ValueError):
    """Raised when min or max is requested from an empty set."""


class BalancedSet(Generic[T]):
    """Ordered set backed by an AVL tree.

    Every recursive helper takes a subtree root and returns the root of the
    transformed subtree, so children are rewired by assignment and no node
    keeps a reference to its parent.
    """

    class Node:
        def __init__(self, value: T) -> None:
            self.value: T = value
            self.left: Optional['BalancedSet.Node'] = None
            self.right: Optional['BalancedSet.Node'] = None
            self.height: int = 0

    def __init__(self) -> None:
        self._root: Optional[BalancedSet.Node] = None
        self._size: int = 0

    @property
    def root(self) -> Optional[Node]:
        """Root node, exposed for structural validation only. Do not mutate."""
        return self._root

    @staticmethod
    def _get_height(node: Optional[Node]) -> int:
        if node is None:
            return -1
        return node.height

    def _update_height(self, node: Node) -> None:
        node.height = 1 + max(self._get_height(node.left), self._get_height(node.right))

    def _get_balance(self, node: Optional[Node]) -> int:
        if node is None:
            return 0
        return self._get_height(node.right) - self._get_height(node.left)

    def _right_rotate(self, node: Node) -> Node:
        pivot = node.left
        assert pivot is not None
        node.left = pivot.right
        pivot.right = node

        # node now sits below pivot
        self._update_height(node)
        self._update_height(pivot)

        return pivot

    def _left_rotate(self, node: Node) -> Node:
        pivot = node.right
        assert pivot is not None
        node.right = pivot.left
        pivot.left = node

        self._update_height(node)
        self._update_height(pivot)

        return pivot

    def _rebalance(self, node: Node) -> Node:
        balance = self._get_balance(node)

        if balance == 2:
            if self._get_balance(node.right) == -1:
                assert node.right is not None
                node.right = self._right_rotate(node.right)
            return self._left_rotate(node)

        if balance == -2:
            if self._get_balance(node.left) == 1:
                assert node.left is not None
                node.left = self._left_rotate(node.left)
            return self._right_rotate(node)

        return node

    def _insert(self, node: Optional[Node], value: T) -> Node:
        if node is None:
            self._size += 1
            return BalancedSet.Node(value)

        if value < node.value:
            node.left = self._insert(node.left, value)
        elif value > node.value:
            node.right = self._insert(node.right, value)
        else:
            return node

        self._update_height(node)
        return self._rebalance(node)

    def insert(self, value: T) -> int:
        """Add value if absent and return the resulting size."""
        self._root = self._insert(self._root, value)
        return self._size

    @staticmethod
    def _min_value(node: Node) -> T:
        while node.left is not None:
            node = node.left
        return node.value

    @staticmethod
    def _max_value(node: Node) -> T:
        while node.right is not None:
            node = node.right
        return node.value

    def _remove(self, node: Optional[Node], value: T) -> Optional[Node]:
        if node is None:
            return None

        if value < node.value:
            node.left = self._remove(node.left, value)
        elif value > node.value:
            node.right = self._remove(node.right, value)
        elif node.left is None or node.right is None:
            self._size -= 1
            return node.left if node.right is None else node.right
        else:
            # two children: take over the in-order successor's value,
            # then drop the successor from the right subtree
            successor = self._min_value(node.right)
            node.value = successor
            node.right = self._remove(node.right, successor)

        self._update_height(node)
        return self._rebalance(node)

    def remove(self, value: T) -> None:
        self._root = self._remove(self._root, value)

    def exists(self, value: T) -> bool:
        node = self._root
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return True
        return False

    def min(self) -> T:
        if self._root is None:
            raise EmptyTreeError("min from empty tree")
        return self._min_value(self._root)

    def max(self) -> T:
        if self._root is None:
            raise EmptyTreeError("max from empty tree")
        return self._max_value(self._root)

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        self._root = None
        self._size = 0

    def height(self) -> int:
        """Height of the whole tree; -1 when empty, 0 for a single node."""
        return self._get_height(self._root)

    def _enumerate(self, node: Optional[Node]) -> List[T]:
        if node is None:
            return []
        result = self._enumerate(node.left)
        result.append(node.value)
        result.extend(self._enumerate(node.right))
        return result

    def enumerate(self) -> List[T]:
        """All values in ascending order."""
        return self._enumerate(self._root)

    def pre_order(self) -> List[T]:
        result: List[T] = []
        if self._root is None:
            return result
        stack: List[BalancedSet.Node] = [self._root]
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def post_order(self) -> List[T]:
        result: List[T] = []
        if self._root is None:
            return result
        stack: List[BalancedSet.Node] = [self._root]
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result

    def copy(self) -> 'BalancedSet[T]':
        clone: BalancedSet[T] = BalancedSet()
        for value in self.pre_order():
            clone.insert(value)
        return clone

    def _is_balanced(self, node: Optional[Node]) -> bool:
        if node is None:
            return True
        if abs(self._get_balance(node)) > 1:
            return False
        return self._is_balanced(node.left) and self._is_balanced(node.right)

    def is_balanced(self) -> bool:
        return self._is_balanced(self._root)

    def _check(self, node: Optional[Node], low: Optional[T], high: Optional[T]) -> int:
        """Count the nodes under node, or return -1 if any invariant fails."""
        if node is None:
            return 0
        if low is not None and not low < node.value:
            return -1
        if high is not None and not node.value < high:
            return -1
        expected = 1 + max(self._get_height(node.left), self._get_height(node.right))
        if node.height != expected or abs(self._get_balance(node)) > 1:
            return -1
        left = self._check(node.left, low, node.value)
        right = self._check(node.right, node.value, high)
        if left < 0 or right < 0:
            return -1
        return 1 + left + right

    def is_valid(self) -> bool:
        """Check ordering, balance, cached heights and the size counter."""
        return self._check(self._root, None, None) == self._size

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: T) -> bool:
        return self.exists(value)

    def __iter__(self) -> Iterator[T]:
        return iter(self.enumerate())

    def __repr__(self) -> str:
        return f"BalancedSet({self.enumerate()})"

    def __str__(self) -> str:
        return f"BalancedSet(size={self._size}, height={self.height()})"
