"""
Subgraph Collector - GraphQL queries against Snapshot subgraphs

Queries are described as nested dicts and rendered to GraphQL text:

    {'spaces': {'__args': {'first': 10, 'where': {'id_in': ['a.eth']}},
                'id': True, 'name': True}}

renders as ``query { spaces (first: 10, where: {id_in: ["a.eth"]}) { id name } }``.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import aiohttp

from config.settings import Settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EnumType:
    """Argument value rendered without quotes"""
    value: str


def _render_value(value: Any) -> str:
    if isinstance(value, EnumType):
        return value.value
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if value is None:
        return 'null'
    if isinstance(value, dict):
        return '{' + ', '.join(f"{key}: {_render_value(item)}" for key, item in value.items()) + '}'
    if isinstance(value, (list, tuple)):
        return '[' + ', '.join(_render_value(item) for item in value) + ']'
    if isinstance(value, str):
        return json.dumps(value)
    return str(value)


def _render_fields(selection: Dict[str, Any]) -> str:
    parts = []
    for key, value in selection.items():
        if key == '__args' or value is False or value is None:
            continue
        if isinstance(value, dict):
            parts.append(f"{key}{_render_args(value)}{_render_selection(value)}")
        else:
            parts.append(key)
    return ' '.join(parts)


def _render_args(selection: Dict[str, Any]) -> str:
    args = selection.get('__args')
    if not args:
        return ''
    return ' (' + ', '.join(f"{key}: {_render_value(value)}" for key, value in args.items()) + ')'


def _render_selection(selection: Dict[str, Any]) -> str:
    fields = _render_fields(selection)
    return f" {{ {fields} }}" if fields else ''


def json_to_graphql_query(query: Dict[str, Any]) -> str:
    """Render a nested dict query description to GraphQL text"""
    return _render_fields(query)


async def subgraph_request(url: str, query: Dict[str, Any], options: Optional[Dict] = None) -> Dict:
    """
    POST a query to a subgraph endpoint

    Args:
        url: Subgraph endpoint
        query: Body of the ``query`` operation as a nested dict
        options: Optional ``headers`` merged into the request headers

    Returns:
        The response's ``data`` object, or {} when absent or the body is
        not a JSON object

    Raises:
        aiohttp.ClientResponseError: non-2xx status, passed through unchanged
    """
    headers = {
        'Accept': 'application/json',
        'Content-Type': 'application/json',
        **((options or {}).get('headers') or {}),
    }
    body = {'query': json_to_graphql_query({'query': query})}
    timeout = aiohttp.ClientTimeout(total=Settings.REQUEST_TIMEOUT)

    async with aiohttp.ClientSession(timeout=timeout) as session:
        async with session.post(url, json=body, headers=headers) as response:
            response.raise_for_status()
            payload = await response.json(content_type=None)

    if not isinstance(payload, dict):
        logger.warning(f"Subgraph {url} returned a non-object body: {type(payload).__name__}")
        return {}
    if payload.get('errors'):
        logger.warning(f"Subgraph {url} returned errors: {payload['errors']}")
    return payload.get('data') or {}
