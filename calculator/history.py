"""会话级计算历史：每个会话一个有上限的环形缓冲，最新的在前"""
import logging
from collections import OrderedDict, deque

import pandas as pd

from config.config import HISTORY_CONFIG

logger = logging.getLogger(__name__)


class HistoryEntry:
    __slots__ = ('expression', 'result')

    def __init__(self, expression, result):
        self.expression = expression
        self.result = result

    def as_dict(self):
        return {'expression': self.expression, 'result': self.result}

    def __repr__(self):
        return f"{self.expression} = {self.result}"


class CalculationHistory:

    def __init__(self, max_entries=None):
        self.max_entries = max_entries or HISTORY_CONFIG['max_entries']
        # deque 的 maxlen 在左端插入时自动从右端淘汰最旧条目
        self._entries = deque(maxlen=self.max_entries)

    def add(self, expression, result):
        entry = HistoryEntry(expression, result)
        self._entries.appendleft(entry)
        return entry

    def entries(self):
        """最新的在前"""
        return list(self._entries)

    def latest(self):
        return self._entries[0] if self._entries else None

    def clear(self):
        self._entries.clear()

    def to_frame(self):
        """导出为 DataFrame，列为 expression / result"""
        return pd.DataFrame([entry.as_dict() for entry in self._entries],
                            columns=['expression', 'result'])

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self.entries())


class HistoryStore:
    """session_id -> CalculationHistory，首次使用时创建"""

    def __init__(self, max_entries=None, max_sessions=None):
        self.max_entries = max_entries or HISTORY_CONFIG['max_entries']
        self.max_sessions = max_sessions or HISTORY_CONFIG['max_sessions']
        # 使用OrderedDict实现LRU，最近使用的会话在末尾
        self._sessions = OrderedDict()

    def _manage_sessions(self):
        """会话数超过上限时淘汰最久未使用的会话"""
        while len(self._sessions) > self.max_sessions:
            session_id, _ = self._sessions.popitem(last=False)
            logger.debug(f"Evicted history for session {session_id!r}")

    def get(self, session_id):
        history = self._sessions.get(session_id)
        if history is None:
            history = CalculationHistory(self.max_entries)
            self._sessions[session_id] = history
            logger.debug(f"Created history for session {session_id!r}")
            self._manage_sessions()
        else:
            self._sessions.move_to_end(session_id)
        return history

    def drop(self, session_id):
        return self._sessions.pop(session_id, None) is not None

    def sessions(self):
        return list(self._sessions.keys())

    def __contains__(self, session_id):
        return session_id in self._sessions

    def __len__(self):
        return len(self._sessions)
