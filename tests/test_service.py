"""
Tests for the JSON-RPC completion service.
"""

import io
import json
import logging
import os
import sys

import pytest

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from emojisense.autocomplete.candidates import CandidateTable, Category
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
from emojisense.autocomplete.service import CompletionService
from emojisense.utils.logger import logger


def make_service(**kwargs):
    table = CandidateTable([
        (Category.PEOPLE, {":smile:": "😄"}),
        (Category.NATURE, {":cat:": "🐱", ":dog:": "🐶"}),
    ])
    return CompletionService(table=table, **kwargs)


def rpc(service, method, params=None, id=1):
    return service.handle_request({'jsonrpc': '2.0', 'method': method, 'params': params or {}, 'id': id})


@pytest.fixture
def clean_logger():
    yield logger
    for handler in logger.logger.handlers:
        handler.close()
    logger.logger.handlers.clear()
    logger.logger.addHandler(logging.NullHandler())
    logger.log_dir = None
    logger.json_mode = False


# ===========================================================================
# Protocol
# ===========================================================================

class TestProtocol:
    def test_request_from_dict(self):
        request = InitializeCompletionRequest.from_dict({
            'trigger': ':',
            'cursor': 12,
            'line': {'text': 'say :', 'start': 7},
            'classifications': [{'start': 7, 'end': 12, 'tag': 'comment'}],
        })
        assert request.cursor == 12
        assert request.line_start == 7
        assert request.classifications[0].tag == 'comment'
        assert request.classifications[0].span.end == 12

    def test_classifications_optional(self):
        request = InitializeCompletionRequest.from_dict(
            {'trigger': ':', 'cursor': 1, 'line': {'text': ':'}}
        )
        assert request.classifications is None
        assert request.line_start == 0

    def test_missing_field(self):
        with pytest.raises(ProtocolError) as exc_info:
            InitializeCompletionRequest.from_dict({'trigger': ':', 'line': {'text': ''}})
        assert exc_info.value.code == INVALID_PARAMS

    def test_bad_classification(self):
        with pytest.raises(ProtocolError):
            InitializeCompletionRequest.from_dict({
                'trigger': ':', 'cursor': 1, 'line': {'text': ':'},
                'classifications': [{'start': 0}],
            })

    def test_message_helpers(self):
        request = JSONRPCMessage.parse(JSONRPCMessage.request('ping', {}, 3))
        assert request == {'jsonrpc': '2.0', 'method': 'ping', 'params': {}, 'id': 3}
        error = JSONRPCMessage.parse(JSONRPCMessage.error(-1, 'boom', 3))
        assert error['error'] == {'code': -1, 'message': 'boom'}


# ===========================================================================
# Request handling
# ===========================================================================

class TestHandleRequest:
    def test_ping(self):
        assert rpc(make_service(), 'ping')['result'] == {'status': 'ok'}

    def test_initialize_participates(self):
        response = rpc(make_service(), 'initializeCompletion', {
            'trigger': ':', 'cursor': 7, 'line': {'text': 'hello :', 'start': 0},
        })
        assert response['id'] == 1
        assert response['result'] == {'participates': True, 'span': {'start': 6, 'end': 7}}

    def test_initialize_with_line_offset(self):
        response = rpc(make_service(), 'initializeCompletion', {
            'trigger': ':', 'cursor': 34, 'line': {'text': 'a :cat: b :dog', 'start': 20},
        })
        assert response['result']['span'] == {'start': 30, 'end': 34}

    def test_initialize_rejected_in_code(self):
        response = rpc(make_service(), 'initializeCompletion', {
            'trigger': ':', 'cursor': 7, 'line': {'text': 'hello :'},
            'classifications': [{'start': 0, 'end': 7, 'tag': 'identifier'}],
        })
        assert response['result'] == {'participates': False}

    def test_initialize_require_classification(self):
        service = make_service(require_classification=True)
        response = rpc(service, 'initializeCompletion', {
            'trigger': ':', 'cursor': 7, 'line': {'text': 'hello :'},
        })
        assert response['result'] == {'participates': False}

    def test_initialize_invalid_params(self):
        response = rpc(make_service(), 'initializeCompletion', {'trigger': ':', 'cursor': 'x', 'line': {'text': ''}})
        assert response['error']['code'] == INVALID_PARAMS

    def test_params_must_be_object(self):
        response = rpc(make_service(), 'initializeCompletion', [1, 2])
        assert response['error']['code'] == INVALID_PARAMS

    def test_completion_context(self):
        response = rpc(make_service(), 'getCompletionContext')
        items = response['result']['items']
        assert [i['name'] for i in items] == [':smile:', ':cat:', ':dog:']
        assert items[1] == {
            'name': ':cat:',
            'display_name': 'Cat',
            'value': '🐱',
            'category': 'Nature',
            'sort_text': '0002',
            'insert_text': '🐱',
            'filter_text': 'Cat',
        }
        assert [f['access_key'] for f in response['result']['filters']] == ['P', 'N']

    def test_get_candidates_alias(self):
        service = make_service()
        assert rpc(service, 'getCandidates')['result'] == rpc(service, 'getCompletionContext')['result']

    def test_description_is_empty(self):
        response = rpc(make_service(), 'getDescription', {'name': ':cat:'})
        assert response['result'] == {'name': ':cat:', 'description': None}

    def test_filters(self):
        response = rpc(make_service(), 'getFilters')
        assert [f['category'] for f in response['result']['filters']] == ['People', 'Nature']

    def test_unknown_method(self):
        response = rpc(make_service(), 'getSuggestion', id=9)
        assert response['error']['code'] == METHOD_NOT_FOUND
        assert response['id'] == 9

    def test_method_must_be_string(self):
        service = make_service()
        response = service.handle_request({'jsonrpc': '2.0', 'method': ['ping'], 'id': 4})
        assert response['error']['code'] == INVALID_REQUEST
        assert response['id'] == 4

        response = service.handle_request({'jsonrpc': '2.0', 'id': 5})
        assert response['error']['code'] == INVALID_REQUEST

    def test_handler_failure_is_internal_error(self, tmp_path, clean_logger):
        logger.configure(level="DEBUG", log_dir=str(tmp_path))
        service = make_service()

        def fail(params):
            raise RuntimeError("table unavailable")

        service._handlers['ping'] = fail
        response = rpc(service, 'ping', id=3)
        assert response['error'] == {'code': INTERNAL_ERROR, 'message': 'table unavailable'}
        assert response['id'] == 3

        debug_log = (tmp_path / "debug.log").read_text(encoding="utf-8")
        assert "[ERROR] ping (id=3)" in debug_log
        assert "table unavailable" in (tmp_path / "error.log").read_text(encoding="utf-8")

    def test_stats(self):
        service = make_service()
        stats = rpc(service, 'getStats')['result']
        assert stats['table_built'] is False
        assert stats['table_size'] == 0

        rpc(service, 'initializeCompletion', {'trigger': ':', 'cursor': 7, 'line': {'text': 'hello :'}})
        rpc(service, 'initializeCompletion', {'trigger': ':', 'cursor': 7, 'line': {'text': 'hello :x'}})
        rpc(service, 'getCompletionContext')
        stats = rpc(service, 'getStats')['result']
        assert stats['requests'] == 5
        assert stats['sessions_opened'] == 1
        assert stats['table_built'] is True
        assert stats['table_size'] == 3


# ===========================================================================
# Stdio loop
# ===========================================================================

class TestRunLoop:
    def run_lines(self, service, *lines):
        stdin = io.StringIO(''.join(line + '\n' for line in lines))
        stdout = io.StringIO()
        service.run(stdin=stdin, stdout=stdout)
        return [json.loads(line) for line in stdout.getvalue().splitlines()]

    def test_one_response_per_request(self):
        responses = self.run_lines(
            make_service(),
            JSONRPCMessage.request('ping', {}, 1),
            '',
            JSONRPCMessage.request('initializeCompletion',
                                   {'trigger': ':', 'cursor': 8, 'line': {'text': 'say :dog'}}, 2),
        )
        assert [r['id'] for r in responses] == [1, 2]
        assert responses[1]['result']['span'] == {'start': 4, 'end': 8}

    def test_invalid_json_keeps_running(self):
        responses = self.run_lines(
            make_service(),
            '{not json',
            '[1, 2]',
            JSONRPCMessage.request('ping', {}, 5),
        )
        assert responses[0]['error']['code'] == PARSE_ERROR
        assert responses[0]['id'] is None
        assert responses[1]['error']['code'] == PARSE_ERROR
        assert responses[2]['result'] == {'status': 'ok'}

    def test_emoji_written_unescaped(self):
        stdin = io.StringIO(JSONRPCMessage.request('getCompletionContext', {}, 1) + '\n')
        stdout = io.StringIO()
        make_service().run(stdin=stdin, stdout=stdout)
        assert '🐱' in stdout.getvalue()

    def test_non_string_method_keeps_running(self):
        responses = self.run_lines(
            make_service(),
            json.dumps({'jsonrpc': '2.0', 'method': ['x'], 'id': 1}),
            json.dumps({'jsonrpc': '2.0', 'method': {'name': 'ping'}, 'id': 2}),
            JSONRPCMessage.request('ping', {}, 3),
        )
        assert len(responses) == 3
        assert responses[0]['error']['code'] == INVALID_REQUEST
        assert responses[1]['error']['code'] == INVALID_REQUEST
        assert responses[2] == {'jsonrpc': '2.0', 'result': {'status': 'ok'}, 'id': 3}
