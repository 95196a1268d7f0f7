from dsalgo.nodes import DoublyListNode, ListNode, TreeNode


def test_list_node_chain_traversal():
    head = ListNode(1, ListNode(2, ListNode(3)))
    values = []
    node = head
    while node is not None:
        values.append(node.val)
        node = node.next
    assert values == [1, 2, 3]


def test_list_node_identity_equality():
    a = ListNode(1)
    b = ListNode(1)
    assert a == a
    assert (a == b) is False


def test_doubly_node_links_both_ways():
    first = DoublyListNode(1)
    second = DoublyListNode(2, pre=first)
    first.next = second
    assert first.next.pre is first
    assert second.pre.val == 1
    assert first.pre is None


def test_tree_node_defaults():
    node = TreeNode(5)
    assert node.val == 5
    assert node.height == 0
    assert node.left is None and node.right is None and node.parent is None


def test_tree_node_parent_positional():
    root = TreeNode(1)
    child = TreeNode(2, root)
    root.left = child
    assert child.parent is root
    assert root.left.val == 2


def test_repr_does_not_follow_cycles():
    root = TreeNode(1)
    child = TreeNode(2, root)
    root.left = child
    text = repr(child)
    assert "val=2" in text
    assert "parent" not in text