"""
Protocol definitions for editor <-> EmojiSense communication.

Uses JSON-RPC 2.0 over stdio, one message per line.
"""

from typing import Dict, Any, List, Optional
from dataclasses import dataclass
import json

from emojisense.autocomplete.classification import ClassificationSpan


PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


class ProtocolError(Exception):
    """A request the service can answer only with a JSON-RPC error."""

    def __init__(self, code: int, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


def _require(params: Dict[str, Any], key: str) -> Any:
    if key not in params:
        raise ProtocolError(INVALID_PARAMS, f"Missing parameter: {key}")
    return params[key]


@dataclass
class InitializeCompletionRequest:
    """A keystroke the host wants a trigger decision for."""
    trigger: str
    cursor: int
    line_text: str
    line_start: int = 0
    classifications: Optional[List[ClassificationSpan]] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'InitializeCompletionRequest':
        """Create request from dictionary."""
        line = data.get('line', {})
        if not isinstance(line, dict):
            raise ProtocolError(INVALID_PARAMS, "'line' must be an object")

        raw_classifications = data.get('classifications')
        try:
            classifications = None
            if raw_classifications is not None:
                classifications = [ClassificationSpan.from_dict(c) for c in raw_classifications]
            return cls(
                trigger=str(_require(data, 'trigger')),
                cursor=int(_require(data, 'cursor')),
                line_text=str(_require(line, 'text')),
                line_start=int(line.get('start', 0)),
                classifications=classifications,
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ProtocolError(INVALID_PARAMS, f"Invalid parameters: {e}") from e


class JSONRPCMessage:
    """JSON-RPC 2.0 message format."""

    @staticmethod
    def request(method: str, params: Dict[str, Any], id: int) -> str:
        """Create a JSON-RPC request."""
        return json.dumps({
            'jsonrpc': '2.0',
            'method': method,
            'params': params,
            'id': id
        }, ensure_ascii=False)

    @staticmethod
    def response(result: Any, id: Any) -> str:
        """Create a JSON-RPC response."""
        return json.dumps({
            'jsonrpc': '2.0',
            'result': result,
            'id': id
        }, ensure_ascii=False)

    @staticmethod
    def error(code: int, message: str, id: Any) -> str:
        """Create a JSON-RPC error response."""
        return json.dumps({
            'jsonrpc': '2.0',
            'error': {
                'code': code,
                'message': message
            },
            'id': id
        }, ensure_ascii=False)

    @staticmethod
    def parse(message: str) -> Dict[str, Any]:
        """Parse a JSON-RPC message."""
        return json.loads(message)
