"""
FastAPI router for the key-value bounded context.

All routes delegate to use cases. No business logic here.
Bodies are plain text in both directions.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from kvstore.application.kv.dtos import (
    EntryResult,
    GetValueQuery,
    ListEntriesQuery,
    SetValueCommand,
)
from kvstore.application.kv.get_value import GetValueUseCase
from kvstore.application.kv.list_entries import ListEntriesUseCase
from kvstore.application.kv.set_value import SetValueUseCase
from kvstore.domain.kv.errors import InvalidValueEncodingError
from kvstore.interfaces.kv.dependencies import (
    get_get_value_use_case,
    get_list_entries_use_case,
    get_set_value_use_case,
)

router = APIRouter(tags=["kv"])


def concatenate_entries(entries: list[EntryResult]) -> str:
    """Join every key directly followed by its value, with no delimiter.

    The result is ambiguous when keys or values run together; it is kept
    as-is for compatibility with existing clients.
    """
    return "".join(entry.key + entry.value for entry in entries)


# Registered before "/{key}" so that it is matched first.
@router.get(
    "/keys",
    response_class=PlainTextResponse,
    summary="List entries",
    description="Concatenation of every key and value, in no particular order.",
)
async def list_keys(
    use_case: ListEntriesUseCase = Depends(get_list_entries_use_case),
) -> PlainTextResponse:
    """Return all entries concatenated."""
    entries = await use_case.execute(ListEntriesQuery())
    return PlainTextResponse(concatenate_entries(entries))


@router.get(
    "/{key}",
    response_class=PlainTextResponse,
    responses={404: {"description": "Key has never been set"}},
    summary="Get a value",
)
async def get_value(
    key: str,
    use_case: GetValueUseCase = Depends(get_get_value_use_case),
) -> PlainTextResponse:
    """Return the value stored under key."""
    result = await use_case.execute(GetValueQuery(key=key))
    return PlainTextResponse(result.value)


@router.post(
    "/{key}",
    response_class=PlainTextResponse,
    responses={400: {"description": "Body is not valid UTF-8"}},
    summary="Set a value",
    description="Stores the raw request body as the value for key.",
)
async def set_value(
    key: str,
    request: Request,
    use_case: SetValueUseCase = Depends(get_set_value_use_case),
) -> PlainTextResponse:
    """Store the request body under key."""
    raw = await request.body()
    try:
        value = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidValueEncodingError(key, exc.reason) from exc
    await use_case.execute(SetValueCommand(key=key, value=value))
    return PlainTextResponse("")
