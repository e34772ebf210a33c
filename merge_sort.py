from __future__ import annotations

from typing import Callable, Optional, Tuple

from models import _Node

Chain = Optional[_Node[str]]
Before = Callable[[str, str], bool]


def prefix_before(a: str, b: str) -> bool:
    """
    a < b を a の先頭 len(b) 文字だけで比較する
    (strncmp(a, b, strlen(b)) < 0)
    """
    return a[:len(b)] < b


def front_back_split(src: _Node[str]) -> Tuple[_Node[str], Chain]:
    """
    fast/slow ポインタでチェーンを前半/後半に切る
    slow は前半の最後のノードで止まる
    奇数長なら前半が 1 つ長い
    """
    slow = src
    fast = src.next
    while fast is not None:
        fast = fast.next
        if fast is not None:
            slow = slow.next
            fast = fast.next

    back = slow.next
    slow.next = None
    return src, back


def _move_node(dst: _Node[str], src: _Node[str]) -> Chain:
    # src の先頭ノードを dst の後ろへ移し、src の残りを返す
    rest = src.next
    src.next = None
    dst.next = src
    return rest


def sorted_merge(a: Chain, b: Chain, before: Before = prefix_before) -> Chain:
    """
    ソート済みチェーン 2 本を 1 本にマージ
    before(a, b) のときだけ a から取る（同値なら b が先）
    """
    dummy: _Node[str] = _Node(value="")
    tail = dummy
    while a is not None and b is not None:
        if before(a.value, b.value):
            node, a = a, _move_node(tail, a)
        else:
            node, b = b, _move_node(tail, b)
        tail = node

    tail.next = a if a is not None else b
    return dummy.next


def merge_sort(head: Chain, before: Before = prefix_before) -> Chain:
    """
    ノードのつなぎ替えだけでチェーンをソートし、新しい head を返す
    ノードの確保・解放はしない
    """
    if head is None or head.next is None:
        return head

    a, b = front_back_split(head)
    a = merge_sort(a, before)
    b = merge_sort(b, before)
    return sorted_merge(a, b, before)
