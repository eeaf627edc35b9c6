import pytest

from minidig.component import Component
from minidig.observer import Event, Observer, Subject


class _Recorder(Observer):
    def __init__(self):
        self.received = []

    def on_notify(self, entity, event):
        self.received.append((entity, event))


class _ComponentSubject(Component, Subject):
    pass


def test_each_event_is_delivered_as_sent():
    subject = Subject()
    recorder = _Recorder()
    subject.add_observer(recorder)
    subject.notify(Event.DEATH)
    subject.notify(Event.SCORE)
    assert recorder.received == [(subject, Event.DEATH), (subject, Event.SCORE)]


def test_observer_is_abstract():
    with pytest.raises(TypeError):
        Observer()


def test_notify_reaches_all_observers_in_order():
    subject = Subject()
    first, second = _Recorder(), _Recorder()
    subject.add_observer(first)
    subject.add_observer(second)
    subject.notify(Event.SCORE)
    assert first.received == [(subject, Event.SCORE)]
    assert second.received == [(subject, Event.SCORE)]
    assert subject.observers == (first, second)


def test_removed_observer_is_not_notified():
    subject = Subject()
    kept, removed = _Recorder(), _Recorder()
    subject.add_observer(kept)
    subject.add_observer(removed)
    subject.remove_observer(removed)
    subject.notify(Event.DEATH)
    assert removed.received == []
    assert kept.received == [(subject, Event.DEATH)]


def test_remove_drops_every_registration():
    subject = Subject()
    recorder = _Recorder()
    subject.add_observer(recorder)
    subject.add_observer(recorder)
    subject.remove_observer(recorder)
    assert subject.observers == ()


def test_component_subject_reports_its_owner():
    owner = object()
    component_subject = _ComponentSubject(owner)
    plain = Subject()
    recorder = _Recorder()
    component_subject.add_observer(recorder)
    plain.add_observer(recorder)
    component_subject.notify(Event.DEATH)
    plain.notify(Event.SCORE)
    assert recorder.received == [(owner, Event.DEATH), (plain, Event.SCORE)]
    assert component_subject.owner is owner