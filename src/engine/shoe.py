"""牌靴 - 多副牌组成的发牌序列，跟踪剩余比例与发牌"""

import logging
import math
import random
from typing import List, Optional, Union

from .card import Card
from .deck import Deck, CARDS_PER_DECK

logger = logging.getLogger(__name__)

# 默认洗牌切点
DEFAULT_CUTOFF = 0.75


class InsufficientCardsError(Exception):
    """牌靴剩余牌数不足以完成本次发牌"""

    def __init__(self, requested: int, remaining: int):
        self.requested = requested
        self.remaining = remaining
        super().__init__(f"牌不够发: 需要 {requested} 张，剩余 {remaining} 张")


class Shoe:
    """牌靴：装入 num_decks 副各自洗好的牌，从前端依次发出。

    past_cutoff() 沿用原有算法：剩余百分比取整（0-100）后直接与 cutoff 比较。
    默认 cutoff=0.75 在这个尺度上只有剩余不足 1% 时才会触发；
    想要"剩余不足 75% 时重洗"，传入 cutoff=75。

    重建由调用方决定：检查 past_cutoff() 后自行调用 create_shoe()。
    """

    def __init__(
        self,
        num_decks: int,
        cutoff: float = DEFAULT_CUTOFF,
        rng: Optional[random.Random] = None,
    ):
        if num_decks < 1:
            raise ValueError(f"num_decks 必须为正整数: {num_decks}")
        self.num_decks = num_decks
        self.cutoff = cutoff
        self.cards: List[Card] = []
        self._rng = rng if rng is not None else random.Random()

    @property
    def total_cards(self) -> int:
        return self.num_decks * CARDS_PER_DECK

    @property
    def remaining(self) -> int:
        return len(self.cards)

    @property
    def percent_remaining(self) -> int:
        """剩余百分比，向下取整到 0-100"""
        return math.floor((len(self.cards) / self.total_cards) * 100)

    def __len__(self) -> int:
        return len(self.cards)

    # ============================================================
    #  建靴
    # ============================================================

    def add_shuffled_deck(self) -> None:
        """建一副新牌、洗好，接到牌靴末尾"""
        deck = Deck(rng=self._rng)
        deck.build()
        deck.shuffle()
        self.cards.extend(deck.cards)

    def create_shoe(self) -> None:
        """清空后装入 num_decks 副牌；每副牌单独洗，各自保持连续"""
        self.cards.clear()
        for _ in range(self.num_decks):
            self.add_shuffled_deck()
        logger.debug("牌靴已建好: %d 副共 %d 张", self.num_decks, len(self.cards))

    # ============================================================
    #  切点与发牌
    # ============================================================

    def past_cutoff(self) -> bool:
        """是否已过切点，需要重洗"""
        return self.percent_remaining < self.cutoff

    def deal(self, num: int = 1) -> Union[Card, List[Card]]:
        """
        从牌靴前端发牌，发出的牌不再留在牌靴中。
        num == 1 返回单张 Card，num > 1 返回按发牌顺序排列的列表。
        牌不够时抛出 InsufficientCardsError，且不移除任何牌。
        """
        if num < 1:
            raise ValueError(f"发牌数必须为正整数: {num}")
        if len(self.cards) < num:
            raise InsufficientCardsError(num, len(self.cards))

        if num == 1:
            return self.cards.pop(0)

        dealt = self.cards[:num]
        del self.cards[:num]
        return dealt
