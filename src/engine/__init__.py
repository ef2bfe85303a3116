# 牌靴与计分引擎
from .card import Card, CardValue, Rank, Suit, RANK_VALUES, card_from_image_name
from .deck import Deck, CARDS_PER_DECK
from .shoe import Shoe, InsufficientCardsError, DEFAULT_CUTOFF
from .hand_eval import eval_hand, score_hand, is_bust, below_hard_17, is_soft
