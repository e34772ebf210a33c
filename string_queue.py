from __future__ import annotations

import logging
from typing import Optional, Tuple, Union

from merge_sort import merge_sort
from models import QueueConfig, _Node

logger = logging.getLogger(__name__)

Text = Union[str, bytes, bytearray]


class Queue:
    """
    単方向リンクで実装した文字列 Queue（FIFO）
    insert_head/insert_tail/remove_head: O(1)
    reverse: O(n), sort: O(n log n)（どちらもノードのつなぎ替えのみ）
    """

    def __init__(self, config: Optional[QueueConfig] = None) -> None:
        self.config = config or QueueConfig()
        self._head: Optional[_Node[str]] = None
        self._tail: Optional[_Node[str]] = None
        self._size: int = 0

    @property
    def head(self) -> Optional[_Node[str]]:
        return self._head

    @property
    def tail(self) -> Optional[_Node[str]]:
        return self._tail

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        n = self._head
        while n is not None:
            nxt = n.next
            n.next = None
            n = nxt
        self._head = self._tail = None
        self._size = 0

    # -------------------------
    # 追加 / 取り出し
    # -------------------------
    def _new_node(self, value: Text) -> Optional[_Node[str]]:
        """
        value のコピーを持つノードを作る
        格納できない値（str/bytes/bytearray 以外など）は None（Queue は変更しない）
        """
        if not isinstance(value, (str, bytes, bytearray)):
            logger.debug("value of type %s is not text", type(value).__name__)
            return None
        try:
            if isinstance(value, str):
                text = value
            else:
                text = bytes(value).decode("utf-8")
            limit = self.config.max_value_len
            if limit is not None and len(text) > limit:
                logger.debug("value of length %d over limit %d", len(text), limit)
                return None
            return _Node(value=text)
        except UnicodeDecodeError:
            logger.debug("value is not valid utf-8")
            return None
        except MemoryError:
            logger.debug("could not allocate node")
            return None

    def insert_head(self, value: Text) -> bool:
        node = self._new_node(value)
        if node is None:
            return False
        node.next = self._head
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return True

    def insert_tail(self, value: Text) -> bool:
        node = self._new_node(value)
        if node is None:
            return False
        if self._tail is None:
            self._head = node
            self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1
        return True

    def remove_head(self, bufsize: Optional[int] = None) -> Tuple[bool, Optional[str]]:
        """
        先頭ノードを取り出す

        bufsize None: 値をそのまま返す
        bufsize n:    最大 n-1 文字を返す（終端の分を空ける）
                      n == 0 なら何もコピーせず None
        空なら (False, None)
        """
        if bufsize is not None and bufsize < 0:
            raise ValueError("bufsize must be >= 0")
        if self._head is None:
            return False, None

        node = self._head
        if bufsize is None:
            text: Optional[str] = node.value
        elif bufsize == 0:
            text = None
        else:
            text = node.value[:bufsize - 1]

        self._head = node.next
        node.next = None
        if self._head is None:
            self._tail = None
        self._size -= 1
        return True, text

    # -------------------------
    # 並べ替え
    # -------------------------
    def reverse(self) -> None:
        # 先頭ノードを順に新しいチェーンへ積み、最後に head/tail を入れ替える
        rev: Optional[_Node[str]] = None
        cur = self._head
        while cur is not None:
            nxt = cur.next
            cur.next = rev
            rev = cur
            cur = nxt
        self._head, self._tail = rev, self._head

    def sort(self) -> None:
        if self._head is None or self._head.next is None:
            return
        self._head = merge_sort(self._head)

        tail = self._tail
        while tail.next is not None:
            tail = tail.next
        self._tail = tail
