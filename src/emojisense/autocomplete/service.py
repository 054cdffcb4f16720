"""
Completion service that communicates with the editor via stdio.

This service runs as a background process and answers trigger and candidate
requests, one JSON-RPC message per line.
"""

import sys
import json
from typing import Any, Dict, Optional, TextIO

from emojisense.autocomplete.classification import Classifier
from emojisense.autocomplete.candidates import CandidateTable
from emojisense.autocomplete.protocol import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    InitializeCompletionRequest,
    JSONRPCMessage,
    ProtocolError,
)
from emojisense.autocomplete.source import CompletionSource
from emojisense.utils.logger import logger


class CompletionService:
    """
    Shortcode completion service that handles requests via JSON-RPC over stdio.
    """

    def __init__(
        self,
        table: Optional[CandidateTable] = None,
        classifier: Optional[Classifier] = None,
        require_classification: bool = False,
    ):
        """
        Initialize completion service.

        Args:
            table: Candidate table (default: the process-wide table)
            classifier: Host tokenizer used when requests carry no classifications
            require_classification: Reject triggers without classification data
        """
        self.source = CompletionSource(
            table=table,
            classifier=classifier,
            require_classification=require_classification,
        )
        self.require_classification = require_classification
        self._requests = 0
        self._sessions_opened = 0
        self._handlers = {
            'initializeCompletion': self._handle_initialize_completion,
            'getCompletionContext': self._handle_get_completion_context,
            'getCandidates': self._handle_get_completion_context,
            'getDescription': self._handle_get_description,
            'getFilters': self._handle_get_filters,
            'getStats': self._handle_get_stats,
            'ping': lambda params: {'status': 'ok'},
        }
        logger.service_start(require_classification=require_classification)

    def handle_request(self, request_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Handle a JSON-RPC request.

        Args:
            request_data: Parsed JSON-RPC request

        Returns:
            Response dictionary
        """
        method = request_data.get('method')
        params = request_data.get('params') or {}
        request_id = request_data.get('id')

        self._requests += 1
        logger.request(method, request_id)

        if not isinstance(method, str):
            logger.response(None, request_id, ok=False)
            return json.loads(JSONRPCMessage.error(
                code=INVALID_REQUEST,
                message="Invalid request: 'method' must be a string",
                id=request_id
            ))

        handler = self._handlers.get(method)
        if handler is None:
            logger.response(method, request_id, ok=False)
            return json.loads(JSONRPCMessage.error(
                code=METHOD_NOT_FOUND,
                message=f"Method not found: {method}",
                id=request_id
            ))

        try:
            if not isinstance(params, dict):
                raise ProtocolError(INVALID_PARAMS, "'params' must be an object")
            result = handler(params)
        except ProtocolError as e:
            logger.warning('RPC', f"{method}: {e.message}")
            logger.response(method, request_id, ok=False)
            return json.loads(JSONRPCMessage.error(code=e.code, message=e.message, id=request_id))
        except Exception as e:
            logger.error('RPC', f"Error handling {method}", e)
            logger.response(method, request_id, ok=False)
            return json.loads(JSONRPCMessage.error(
                code=INTERNAL_ERROR,
                message=str(e),
                id=request_id
            ))

        logger.response(method, request_id, ok=True)
        return json.loads(JSONRPCMessage.response(result, request_id))

    def _handle_initialize_completion(self, params: Dict[str, Any]) -> Dict[str, Any]:
        """
        Handle initializeCompletion request.

        Args:
            params: trigger, cursor, line {text, start}, optional classifications

        Returns:
            Participation result, with the applicable span when participating
        """
        request = InitializeCompletionRequest.from_dict(params)
        match = self.source.initialize_completion(
            request.trigger,
            request.cursor,
            request.line_text,
            line_start=request.line_start,
            classifications=request.classifications,
        )
        if match.participates:
            self._sessions_opened += 1
        return match.to_dict()

    def _handle_get_completion_context(self, params: Dict[str, Any]) -> Dict[str, Any]:
        return self.source.get_completion_context().to_dict()

    def _handle_get_description(self, params: Dict[str, Any]) -> Dict[str, Any]:
        name = params.get('name', '')
        return {'name': name, 'description': self.source.get_description(name)}

    def _handle_get_filters(self, params: Dict[str, Any]) -> Dict[str, Any]:
        return {'filters': [f.to_dict() for f in self.source.filters]}

    def _handle_get_stats(self, params: Dict[str, Any]) -> Dict[str, Any]:
        """
        Handle getStats request.

        Returns:
            Statistics about the service
        """
        table = self.source.table
        return {
            'requests': self._requests,
            'sessions_opened': self._sessions_opened,
            'table_built': table.is_built,
            'table_size': len(table) if table.is_built else 0,
            'require_classification': self.require_classification,
        }

    def run(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        """
        Run the service loop, reading from stdin and writing to stdout.
        """
        stdin = stdin or sys.stdin
        stdout = stdout or sys.stdout
        reason = "EOF received"

        try:
            while True:
                line = stdin.readline()

                if not line:
                    break

                line = line.strip()
                if not line:
                    continue

                try:
                    request_data = json.loads(line)
                except json.JSONDecodeError as e:
                    logger.warning('RPC', f"Invalid JSON: {e}")
                    print(JSONRPCMessage.error(code=PARSE_ERROR, message="Parse error", id=None),
                          file=stdout, flush=True)
                    continue

                if not isinstance(request_data, dict):
                    print(JSONRPCMessage.error(code=PARSE_ERROR, message="Parse error", id=None),
                          file=stdout, flush=True)
                    continue

                response = self.handle_request(request_data)
                print(json.dumps(response, ensure_ascii=False), file=stdout, flush=True)

        except KeyboardInterrupt:
            reason = "interrupted by user"
        finally:
            logger.service_stop(reason)


def main():
    """Main entry point for the completion service."""
    import argparse
    from dotenv import load_dotenv

    from emojisense.config import Config

    load_dotenv()
    config = Config.from_env()

    parser = argparse.ArgumentParser(description='EmojiSense completion service')
    parser.add_argument(
        '--require-classification',
        action='store_true',
        default=config.require_classification,
        help='Only open completion where the host reports a string or comment'
    )
    args = parser.parse_args()

    config.configure_logging()
    service = CompletionService(require_classification=args.require_classification)
    service.run()


if __name__ == '__main__':
    main()
