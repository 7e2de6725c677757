"""
Interest business logic.

Scope:
- one store call per request (list also reads both column sums)
- summary computation
- mapping "absent" results to 404 and store failures to 500

Store failure detail is logged here and never reaches the client.
"""

from __future__ import annotations

import logging
import math
from contextlib import contextmanager
from typing import Iterator

from fastapi import HTTPException, status

from . import schemas
from .store import InterestStore, StoreError

logger = logging.getLogger(__name__)


@contextmanager
def _store_boundary(operation: str, public_message: str) -> Iterator[None]:
    try:
        yield
    except StoreError as exc:
        logger.exception(
            "store_failure operation=%s store_operation=%s error=%s",
            operation,
            exc.operation,
            exc.message,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=public_message,
        ) from exc


def build_summary(sum_textbox3: float, sum_textbox4: float) -> schemas.InterestSummary:
    """
    Raises ValueError when a total or the difference is not finite
    (JSON has no representation for inf/nan).
    """
    sum3 = float(sum_textbox3)
    sum4 = float(sum_textbox4)
    difference = sum3 - sum4
    if not all(math.isfinite(value) for value in (sum3, sum4, difference)):
        raise ValueError(f"Summary is not finite: sum3={sum3} sum4={sum4} difference={difference}")
    return schemas.InterestSummary(sumTextbox3=sum3, sumTextbox4=sum4, difference=difference)


async def list_interests(store: InterestStore) -> schemas.InterestListData:
    with _store_boundary("list_interests", "Failed to fetch interests"):
        interests = await store.list()
        sum_textbox3 = await store.sum("textbox3")
        sum_textbox4 = await store.sum("textbox4")

    try:
        summary = build_summary(sum_textbox3, sum_textbox4)
    except ValueError as exc:
        logger.error("summary_overflow operation=list_interests error=%s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch interests",
        ) from exc
    logger.debug(
        "interest_summary count=%s sum_textbox3=%s sum_textbox4=%s difference=%s",
        len(interests),
        summary.sumTextbox3,
        summary.sumTextbox4,
        summary.difference,
    )
    return schemas.InterestListData(interests=interests, summary=summary)


async def create_interest(store: InterestStore, fields: schemas.InterestFields) -> int:
    with _store_boundary("create_interest", "Failed to create interest"):
        interest_id = await store.create(fields)
    logger.info("interest_created id=%s", interest_id)
    return interest_id


async def get_interest(store: InterestStore, interest_id: int) -> schemas.Interest:
    with _store_boundary("get_interest", "Failed to fetch interest"):
        interest = await store.get_by_id(interest_id)

    if interest is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Interest not found")
    return interest


async def update_interest(
    store: InterestStore,
    interest_id: int,
    fields: schemas.InterestFields,
) -> int:
    with _store_boundary("update_interest", "Failed to update interest"):
        affected = await store.update(interest_id, fields)

    if affected == 0:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Interest not found or not updated",
        )
    logger.info("interest_updated id=%s", interest_id)
    return interest_id


async def delete_interest(store: InterestStore, interest_id: int) -> None:
    with _store_boundary("delete_interest", "Failed to delete interest"):
        affected = await store.delete(interest_id)

    if affected == 0:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Interest not found or not deleted",
        )
    logger.info("interest_deleted id=%s", interest_id)
