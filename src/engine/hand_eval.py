"""手牌计分 - 21点 A 可作 1 或 11 的计分规则"""

import logging
from typing import Sequence

from .card import Card, Rank, ACE_VALUE

logger = logging.getLogger(__name__)

BLACKJACK = 21
DEALER_STAND = 17


def eval_hand(hand: Sequence[Card]) -> int:
    """
    计算一手牌的点数。
    A 先按 11 计（1 + 10），总分超过 21 时逐张改按 1 计。
    空手牌得 0 分。不修改传入的手牌。
    """
    num_aces = sum(1 for c in hand if c.rank == Rank.ACE)
    score = sum(sum(c.value.contributions()) for c in hand)
    logger.debug("eval_hand: num_aces=%d raw=%d", num_aces, score)

    # 会爆牌的 A 改按 1 点
    while score > BLACKJACK and num_aces:
        score -= ACE_VALUE.soft_bonus
        num_aces -= 1

    logger.debug("eval_hand: score=%d", score)
    return score


def score_hand(hand: Sequence[Card]) -> int:
    """手牌点数"""
    return eval_hand(hand)


def is_bust(hand: Sequence[Card]) -> bool:
    """是否爆牌（超过21点）"""
    return eval_hand(hand) > BLACKJACK


def below_hard_17(hand: Sequence[Card]) -> bool:
    """庄家手牌是否低于17点（低于则必须继续要牌）"""
    return eval_hand(hand) < DEALER_STAND


def is_soft(hand: Sequence[Card]) -> bool:
    """是否为软牌：至少有一张 A 仍按 11 计"""
    hard_total = sum(c.value.base for c in hand)
    has_ace = any(c.value.is_dual for c in hand)
    return has_ace and hard_total + ACE_VALUE.soft_bonus <= BLACKJACK
