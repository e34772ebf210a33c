"""
Queue を handle 形式で呼び出すための関数群

q が None でも例外は出さない: 追加/取り出しは False、
size は 0、それ以外は何もしない
"""
from __future__ import annotations

import logging
from typing import Optional

from models import QueueConfig
from string_queue import Queue, Text

logger = logging.getLogger(__name__)


def new_queue(config: Optional[QueueConfig] = None) -> Optional[Queue]:
    try:
        return Queue(config)
    except MemoryError:
        logger.debug("could not allocate queue")
        return None


def free_queue(q: Optional[Queue]) -> None:
    if q is None:
        return
    q.clear()


def insert_head(q: Optional[Queue], value: Text) -> bool:
    if q is None:
        logger.debug("insert_head on absent queue")
        return False
    return q.insert_head(value)


def insert_tail(q: Optional[Queue], value: Text) -> bool:
    if q is None:
        logger.debug("insert_tail on absent queue")
        return False
    return q.insert_tail(value)


def remove_head(q: Optional[Queue], buf: Optional[bytearray] = None, bufsize: int = 0) -> bool:
    """
    先頭の値を取り出す。buf があれば UTF-8 で最大 bufsize-1 バイト
    + 終端の 0 をコピーする

    bufsize は len(buf) で頭打ち（はみ出さない）。bufsize 0 なら buf に書かない
    コピーはノードを外す前に行う。書き込めない buf なら False で
    Queue は変更しない
    """
    if q is None:
        logger.debug("remove_head on absent queue")
        return False
    if bufsize < 0:
        raise ValueError("bufsize must be >= 0")
    if q.head is None:
        return False

    if buf is not None:
        try:
            view = memoryview(buf).cast("B")
        except TypeError:
            logger.debug("remove_head buffer is not a byte buffer")
            return False
        if view.readonly:
            logger.debug("remove_head buffer is read-only")
            return False
        n = min(bufsize, len(view))
        if n > 0:
            data = q.head.value.encode("utf-8")[:n - 1]
            view[:len(data)] = data
            view[len(data)] = 0

    ok, _ = q.remove_head(0)
    return ok


def queue_size(q: Optional[Queue]) -> int:
    if q is None:
        return 0
    return q.size()


def reverse(q: Optional[Queue]) -> None:
    if q is None:
        return
    q.reverse()


def sort(q: Optional[Queue]) -> None:
    if q is None:
        return
    q.sort()
