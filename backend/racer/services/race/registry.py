from typing import Dict, Iterator, Optional, Tuple

from racer.models import Player


class PlayerRegistry:
    def __init__(self):
        self.players: Dict[str, Player] = {}

    def join(self, sid: str, name: Optional[str]) -> Player:
        # Default names come from the current size and may repeat after departures
        player = Player(sid, name or f"Player{len(self.players)}")
        self.players[sid] = player
        return player

    def leave(self, sid: str) -> Tuple[Optional[Player], bool]:
        player = self.players.pop(sid, None)
        return player, not self.players

    def get(self, sid: str) -> Optional[Player]:
        return self.players.get(sid)

    def finished_count(self) -> int:
        return sum(1 for p in self.players.values() if p.finished)

    def all_finished(self) -> bool:
        return bool(self.players) and all(p.finished for p in self.players.values())

    def lobby_roster(self):
        return [{'name': p.name, 'ready': False} for p in self.players.values()]

    def to_dict(self) -> Dict[str, Dict]:
        return {sid: p.to_dict() for sid, p in self.players.items()}

    def __iter__(self) -> Iterator[Player]:
        return iter(list(self.players.values()))

    def __len__(self):
        return len(self.players)

    def __contains__(self, sid):
        return sid in self.players
