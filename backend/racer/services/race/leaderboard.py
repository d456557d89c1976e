from typing import Dict, List

from racer.models import LeaderboardEntry


class Leaderboard:
    """Top-N best finish times, one entry per player name."""

    def __init__(self, size: int = 10):
        self.size = size
        self.entries: List[LeaderboardEntry] = []

    def find(self, name: str):
        for entry in self.entries:
            if entry.name == name:
                return entry
        return None

    def record(self, name: str, time: int, clicks: int) -> bool:
        existing = self.find(name)
        if existing and time >= existing.time:
            return False
        if existing:
            existing.time = time
            existing.clicks = clicks
        else:
            self.entries.append(LeaderboardEntry(name, time, clicks))
        self.entries.sort(key=lambda e: e.time)
        del self.entries[self.size:]
        return True

    def snapshot(self) -> List[Dict]:
        return [e.to_dict() for e in self.entries]

    def __len__(self):
        return len(self.entries)
