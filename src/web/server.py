"""HTTP 演示服务 - 通过 REST 接口使用牌靴发牌与手牌计分

需要安装 web 扩展: pip install -e ".[web]"
启动: uvicorn src.web.server:app --reload
"""

import logging
import os
from typing import List, Optional

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel, Field

from src.engine.card import Card, card_from_image_name
from src.engine.shoe import Shoe, InsufficientCardsError, DEFAULT_CUTOFF
from src.engine.hand_eval import score_hand, is_bust, below_hard_17, is_soft

logger = logging.getLogger(__name__)

# 启动时的默认牌靴配置
DEFAULT_DECKS = int(os.getenv("BLACKJACK_DECKS", "6"))
STARTUP_CUTOFF = float(os.getenv("BLACKJACK_CUTOFF", str(DEFAULT_CUTOFF)))


# ============================================================
#  请求体
# ============================================================

class ShoeConfig(BaseModel):
    num_decks: int = Field(DEFAULT_DECKS, ge=1)
    cutoff: float = STARTUP_CUTOFF


class HandRequest(BaseModel):
    cards: List[str]  # 图片名，如 "AS.png" 或 "AS"


# ============================================================
#  序列化工具
# ============================================================

def card_to_dict(c: Card) -> dict:
    """将 Card 序列化为前端可用的 dict"""
    return {
        "suit": c.suit.value,
        "rank": c.rank.value,
        "value": list(c.value.options),
        "image_name": c.image_name,
        "display": c.display,
    }


def shoe_to_dict(shoe: Shoe) -> dict:
    """将牌靴状态序列化"""
    return {
        "num_decks": shoe.num_decks,
        "cutoff": shoe.cutoff,
        "remaining": shoe.remaining,
        "percent_remaining": shoe.percent_remaining,
        "past_cutoff": shoe.past_cutoff(),
    }


# ============================================================
#  FastAPI 应用
# ============================================================

app = FastAPI(title="21点牌靴")

# 单进程共用一个牌靴
_shoe: Optional[Shoe] = None


def get_shoe() -> Shoe:
    """取当前牌靴，首次使用时按默认配置建靴"""
    global _shoe
    if _shoe is None:
        _shoe = Shoe(DEFAULT_DECKS, cutoff=STARTUP_CUTOFF)
        _shoe.create_shoe()
    return _shoe


@app.post("/shoe")
async def new_shoe(config: ShoeConfig):
    """按配置新建并装好牌靴"""
    global _shoe
    _shoe = Shoe(config.num_decks, cutoff=config.cutoff)
    _shoe.create_shoe()
    logger.info("新牌靴: %d 副, cutoff=%s", config.num_decks, config.cutoff)
    return shoe_to_dict(_shoe)


@app.get("/shoe")
async def shoe_status():
    """查询牌靴剩余与切点状态"""
    return shoe_to_dict(get_shoe())


@app.post("/deal")
async def deal(num: int = Query(1, ge=1)):
    """发牌；牌不够时返回 409，且不移除任何牌"""
    shoe = get_shoe()
    try:
        dealt = shoe.deal(num)
    except InsufficientCardsError as e:
        raise HTTPException(status_code=409, detail=str(e))

    cards = [dealt] if num == 1 else dealt
    return {
        "cards": [card_to_dict(c) for c in cards],
        "shoe": shoe_to_dict(shoe),
    }


@app.post("/score")
async def score(req: HandRequest):
    """对一手牌计分"""
    try:
        hand = [card_from_image_name(name) for name in req.cards]
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return {
        "score": score_hand(hand),
        "bust": is_bust(hand),
        "below_hard_17": below_hard_17(hand),
        "soft": is_soft(hand),
    }
