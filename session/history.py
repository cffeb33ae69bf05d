"""计算历史 - 最新在前，有上限"""
import time
from collections import deque
from typing import NamedTuple

import pandas as pd

from config.config import SESSION_CONFIG


class HistoryEntry(NamedTuple):
    equation: str
    result: str
    timestamp: float  # 毫秒


class History:

    def __init__(self, limit=None):
        self.limit = SESSION_CONFIG['history_limit'] if limit is None else limit
        self._entries = deque(maxlen=self.limit)

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def __getitem__(self, index):
        return self._entries[index]

    def push(self, equation, result):
        """加到最前面，超过上限时丢掉最旧的一条"""
        entry = HistoryEntry(equation, result, time.time() * 1000)
        self._entries.appendleft(entry)
        return entry

    def clear(self):
        self._entries.clear()

    def to_frame(self):
        """转为DataFrame（equation, result, timestamp）"""
        df = pd.DataFrame(list(self._entries), columns=list(HistoryEntry._fields))
        df['timestamp'] = pd.to_datetime(df['timestamp'], unit='ms')
        return df
