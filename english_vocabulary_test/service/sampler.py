from random import Random
from typing import Sequence

from loguru import logger

from english_vocabulary_test.model import Card, CardList


def priority_offset(cards: Sequence[Card]) -> int:
    """Offset that maps the lowest priority of ``cards`` to a weight of 1."""
    return 1 - min(card.priority for card in cards)


def effective_weights(cards: Sequence[Card]) -> list[int]:
    if not cards:
        return []
    offset = priority_offset(cards)
    return [card.priority + offset for card in cards]


def select_cards(card_list: CardList, num_problem: int, rng: Random) -> list[Card]:
    """
    Pick up to ``num_problem`` distinct cards, each draw weighted by the
    normalized priority of the cards not chosen yet, then shuffle the result
    so that priority decides which cards appear but not where.

    Args:
        card_list: Pool of non-empty cards, left untouched
        num_problem: Requested number of cards
        rng: Random source, only its state is advanced

    Returns:
        List[Card]: Copies of the selected cards in shuffled order
    """
    cards = card_list.cards
    if not cards:
        return []

    weights = effective_weights(cards)
    sum_of_weights = sum(weights)
    selected: list[Card] = []

    for _ in range(num_problem):
        if sum_of_weights <= 0:
            break
        r = rng.randrange(sum_of_weights)
        for index, weight in enumerate(weights):
            r -= weight
            if r < 0:
                selected.append(cards[index].model_copy(deep=True))
                sum_of_weights -= weight
                weights[index] = 0
                break

    logger.debug(f"Selected {len(selected)} of {len(cards)} cards")
    rng.shuffle(selected)
    return selected
