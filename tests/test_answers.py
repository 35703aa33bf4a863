"""Tests for the answer collection engine."""

import pytest

from skyanswers import SkyAnswers, SkysmartSession
from skyanswers.config import AUTH_URL, ROOM_URL
from skyanswers.extractor import EXTRACTION_RULES
from tests.helpers import FakeTransport, make_response, room_routes, step_url


def engine_for(transport, **kwargs):
    return SkyAnswers(session=SkysmartSession(http=transport), **kwargs)


def test_collects_answers_in_room_order():
    transport = FakeTransport(room_routes(['s1', 's2'], {
        's1': '<p>Capital?</p><vim-test-item correct="true">Paris</vim-test-item>',
        's2': '<p>Sum?</p><math-input-answer>4</math-input-answer>',
    }))

    answers = engine_for(transport).get_answers('room')

    assert [a.task_number for a in answers] == [1, 2]
    assert answers[0].answers == ('Paris',)
    assert answers[1].answers == ('4',)
    assert answers[1].question == 'Sum?4'


def test_failed_step_is_dropped_and_numbering_compacts():
    transport = FakeTransport(room_routes(['s1', 's2', 's3'], {
        's1': '<p>first</p>',
        's2': make_response(500, {}, step_url('s2')),
        's3': '<p>third</p>',
    }))

    answers = engine_for(transport).get_answers('room')

    assert len(answers) == 2
    assert [a.question for a in answers] == ['first', 'third']
    assert [a.task_number for a in answers] == [1, 2]


def test_step_without_content_is_dropped():
    routes = room_routes(['s1', 's2'])
    routes[('GET', step_url('s1'))] = make_response(200, {'id': 's1'}, step_url('s1'))
    transport = FakeTransport(routes)

    answers = engine_for(transport).get_answers('room')

    assert [a.question for a in answers] == ['Question s2']


def test_extraction_failure_is_isolated():
    def explode(document):
        if 'boom' in document.text():
            raise RuntimeError('rule crashed')
        return []

    transport = FakeTransport(room_routes(['s1', 's2'], {'s1': '<p>boom</p>', 's2': '<p>fine</p>'}))
    engine = engine_for(transport)
    engine.extractor.rules = EXTRACTION_RULES + [('explode', explode)]

    answers = engine.get_answers('room')

    assert [(a.task_number, a.question) for a in answers] == [(1, 'fine')]


def test_task_cap():
    task_ids = [f"s{i}" for i in range(60)]
    transport = FakeTransport(room_routes(task_ids))

    answers = engine_for(transport, max_tasks=50).get_answers('room')

    assert len(transport.step_calls()) == 50
    assert len(answers) == 50
    assert answers[-1].question == 'Question s49'


def test_single_token_for_whole_room():
    transport = FakeTransport(room_routes(['s1', 's2', 's3']))

    engine_for(transport).get_answers('room')

    assert len(transport.calls_to(AUTH_URL)) == 1


@pytest.mark.parametrize('routes', [
    {('POST', ROOM_URL): make_response(500, {}, ROOM_URL)},
    {('POST', ROOM_URL): make_response(200, {'meta': {}}, ROOM_URL)},
    {('POST', AUTH_URL): make_response(403, {}, AUTH_URL)},
])
def test_resolution_failure_gives_empty_list(routes):
    transport = FakeTransport(routes)

    assert engine_for(transport).get_answers('room') == []
    assert transport.step_calls() == []


def test_empty_room():
    transport = FakeTransport(room_routes([]))

    assert engine_for(transport).get_answers('room') == []


def test_injected_session_keeps_token():
    session = SkysmartSession(http=FakeTransport(room_routes(['s1'])))

    SkyAnswers(session=session).get_answers('room')

    assert session.has_token


def test_own_session_is_released(monkeypatch):
    transport = FakeTransport(room_routes(['s1']))
    monkeypatch.setattr('skyanswers.answers.SkysmartSession', lambda: SkysmartSession(http=transport))

    engine = SkyAnswers()
    answers = engine.get_answers('room')

    assert len(answers) == 1
    assert not engine.session.has_token


def test_deeply_nested_room_body_gives_empty_list(monkeypatch):
    body = '[' * 200000 + ']' * 200000
    transport = FakeTransport({('POST', ROOM_URL): make_response(200, text=body, url=ROOM_URL)})
    monkeypatch.setattr('skyanswers.answers.SkysmartSession', lambda: SkysmartSession(http=transport))

    engine = SkyAnswers()

    assert engine.get_answers('room') == []
    assert transport.step_calls() == []
    assert not engine.session.has_token


def test_unexpected_resolver_error_gives_empty_list():
    transport = FakeTransport(room_routes(['s1']))
    engine = engine_for(transport)

    def broken(task_hash):
        raise KeyError(task_hash)

    engine.resolver.resolve = broken

    assert engine.get_answers('room') == []
    assert transport.step_calls() == []


@pytest.mark.parametrize('max_tasks', [0, -1])
def test_task_cap_is_at_least_one(max_tasks):
    transport = FakeTransport(room_routes(['s1', 's2', 's3']))

    answers = engine_for(transport, max_tasks=max_tasks).get_answers('room')

    assert len(transport.step_calls()) == 1
    assert [a.question for a in answers] == ['Question s1']
