"""一副牌 - 建牌与 Fisher-Yates 洗牌"""

import random
from typing import List, Optional

from .card import Card, Rank, Suit, RANK_VALUES

CARDS_PER_DECK = 52


class Deck:
    """一副52张的牌（不含大小王），只作为建牌工具，牌交给牌靴后即丢弃"""

    def __init__(self, rng: Optional[random.Random] = None):
        self.cards: List[Card] = []
        self._rng = rng if rng is not None else random.Random()

    def build(self) -> None:
        """按花色优先、点数其次的固定顺序建牌；重复调用不会叠加"""
        self.cards.clear()
        for suit in Suit:
            for rank in Rank:
                self.cards.append(Card(suit=suit, rank=rank, value=RANK_VALUES[rank]))

        assert len(self.cards) == CARDS_PER_DECK, f"牌数错误: {len(self.cards)}"

    def shuffle(self) -> None:
        """原地 Fisher-Yates 洗牌，O(n)"""
        cards = self.cards
        for i in range(len(cards) - 1, 0, -1):
            j = self._rng.randint(0, i)
            cards[i], cards[j] = cards[j], cards[i]

    def __len__(self) -> int:
        return len(self.cards)
