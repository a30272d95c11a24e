import pytest

from typedcollections import EmptyContainerError, LinkedQueue, TypeMismatchError


@pytest.fixture(name="queue")
def fixture_queue():
    queue = LinkedQueue()
    for number in (1, 2, 3):
        queue.offer(number)
    return queue


def test_first_in_first_out(queue):
    assert queue.dequeue() == 1
    assert queue.poll() == 2
    queue.add(4)
    assert queue.dequeue() == 3
    assert queue.dequeue() == 4
    assert queue.dequeue() is None


def test_peek_and_element(queue):
    assert queue.peek() == 1
    assert queue.element() == 1
    assert queue.size() == 3


def test_empty_queue_access():
    queue = LinkedQueue()
    assert queue.poll() is None
    assert queue.dequeue() is None
    assert queue.peek() is None
    with pytest.raises(EmptyContainerError, match="Queue is empty"):
        queue.element()


def test_offer_validates(queue):
    with pytest.raises(TypeMismatchError):
        queue.offer("four")
    assert queue.to_array() == [1, 2, 3]


def test_queue_keeps_inference_after_draining(queue):
    while not queue.is_empty():
        queue.poll()
    with pytest.raises(TypeMismatchError):
        queue.offer("text")


def test_clear_resets_inference(queue):
    queue.clear()
    assert queue.is_empty()
    assert queue.peek() is None
    queue.offer("text")
    assert queue.element() == "text"


@pytest.mark.parametrize(
    "element, expected", [(1, [2, 3]), (2, [1, 3]), (3, [1, 2])]
)
def test_remove_element(queue, element, expected):
    assert queue.remove(element)
    assert queue.to_array() == expected
    queue.offer(9)
    assert queue.to_array() == [*expected, 9]


def test_remove_missing_element(queue):
    assert not queue.remove(42)
    assert queue.size() == 3


def test_remove_only_element_then_offer():
    queue = LinkedQueue()
    queue.offer("a")
    assert queue.remove("a")
    assert queue.peek() is None
    queue.offer("b")
    assert queue.to_array() == ["b"]


def test_iterator_remove_consecutive(queue):
    queue.offer(4)
    iterator = queue.iterator()
    while iterator.has_next():
        if iterator.next() in (2, 3):
            iterator.remove()
    assert queue.to_array() == [1, 4]


def test_remove_all_and_retain_all(queue):
    assert queue.remove_all([1, 3])
    assert queue.to_array() == [2]
    queue.offer(5)
    assert queue.retain_all([5])
    assert queue.to_array() == [5]
    assert queue.dequeue() == 5


def test_contains_and_iteration(queue):
    assert queue.contains(2)
    assert 5 not in queue
    assert list(queue) == [1, 2, 3]
