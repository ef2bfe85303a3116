"""牌的定义 - 21点标准52张扑克牌的数据模型"""

from enum import Enum
from dataclasses import dataclass, field
from typing import Dict, Tuple


class Suit(str, Enum):
    """花色枚举（顺序即建牌顺序）"""
    CLUBS = "clubs"
    DIAMONDS = "diamonds"
    HEARTS = "hearts"
    SPADES = "spades"


class Rank(str, Enum):
    """点数枚举（顺序即建牌顺序）"""
    ACE = "ace"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "jack"
    QUEEN = "queen"
    KING = "king"


@dataclass(frozen=True)
class CardValue:
    """牌值：固定值，或 A 的双值（基础1点 + 软加成10点）"""
    base: int
    soft_bonus: int = 0

    @property
    def is_dual(self) -> bool:
        return self.soft_bonus > 0

    @property
    def options(self) -> Tuple[int, ...]:
        """可选的计分值，A 为 (1, 11)"""
        if self.is_dual:
            return (self.base, self.base + self.soft_bonus)
        return (self.base,)

    def contributions(self) -> Tuple[int, ...]:
        """计分时逐项累加的分量，A 为 (1, 10)，合计按 11 计"""
        if self.is_dual:
            return (self.base, self.soft_bonus)
        return (self.base,)


ACE_VALUE = CardValue(1, 10)

# 点数 → 牌值（10 与人头牌都算 10 点）
RANK_VALUES: Dict[Rank, CardValue] = {
    Rank.ACE: ACE_VALUE,
    Rank.TWO: CardValue(2), Rank.THREE: CardValue(3), Rank.FOUR: CardValue(4),
    Rank.FIVE: CardValue(5), Rank.SIX: CardValue(6), Rank.SEVEN: CardValue(7),
    Rank.EIGHT: CardValue(8), Rank.NINE: CardValue(9), Rank.TEN: CardValue(10),
    Rank.JACK: CardValue(10), Rank.QUEEN: CardValue(10), Rank.KING: CardValue(10),
}

# 终端显示用
SUIT_SYMBOL = {
    Suit.CLUBS: "♣", Suit.DIAMONDS: "♦", Suit.HEARTS: "♥", Suit.SPADES: "♠",
}

RANK_DISPLAY = {
    Rank.ACE: "A", Rank.TWO: "2", Rank.THREE: "3", Rank.FOUR: "4",
    Rank.FIVE: "5", Rank.SIX: "6", Rank.SEVEN: "7", Rank.EIGHT: "8",
    Rank.NINE: "9", Rank.TEN: "10", Rank.JACK: "J", Rank.QUEEN: "Q",
    Rank.KING: "K",
}

IMAGE_SUFFIX = ".png"


def make_image_name(rank: Rank, suit: Suit) -> str:
    """牌面图片名：点数与花色首字母大写 + .png，如 AS.png、1H.png"""
    return (rank.value[0] + suit.value[0]).upper() + IMAGE_SUFFIX


@dataclass(frozen=True)
class Card:
    """一张扑克牌"""
    suit: Suit
    rank: Rank
    value: CardValue
    image_name: str = field(init=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "image_name", make_image_name(self.rank, self.suit))

    @property
    def display(self) -> str:
        return f"{SUIT_SYMBOL[self.suit]}{RANK_DISPLAY[self.rank]}"

    def __repr__(self) -> str:
        return self.display


# 图片名 → (点数, 花色)，首字母组合在标准牌中唯一
_IMAGE_INDEX = {
    make_image_name(rank, suit): (rank, suit)
    for suit in Suit for rank in Rank
}


def card_from_image_name(name: str) -> Card:
    """由图片名还原一张牌，未知名称抛出 ValueError"""
    # 允许省略后缀: "AS" 与 "as.png" 都可
    key = name.strip().upper()
    if key.endswith(IMAGE_SUFFIX.upper()):
        key = key[: -len(IMAGE_SUFFIX)]
    key += IMAGE_SUFFIX
    if key not in _IMAGE_INDEX:
        raise ValueError(f"未知的牌: {name!r}")
    rank, suit = _IMAGE_INDEX[key]
    return Card(suit=suit, rank=rank, value=RANK_VALUES[rank])
