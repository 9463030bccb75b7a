import threading

from pagecrawl.domain.visited_tracker import VisitedTracker


def test_first_mark_claims_url():
    tracker = VisitedTracker()
    assert tracker.mark_if_new("https://example.com") is True


def test_second_mark_of_same_url_is_refused():
    tracker = VisitedTracker()
    tracker.mark_if_new("https://example.com/a")
    assert tracker.mark_if_new("https://example.com/a") is False


def test_different_urls_tracked_independently():
    tracker = VisitedTracker()
    assert tracker.mark_if_new("https://example.com")
    assert tracker.mark_if_new("https://other.com")


def test_urls_compare_case_insensitively():
    tracker = VisitedTracker()
    tracker.mark_if_new("https://Example.com/Page")
    assert tracker.mark_if_new("HTTPS://EXAMPLE.COM/page") is False


def test_fragment_makes_a_separate_entry():
    tracker = VisitedTracker()
    tracker.mark_if_new("https://example.com/a")
    assert tracker.mark_if_new("https://example.com/a#x") is True


def test_mark_if_new_is_exclusive_across_threads():
    tracker = VisitedTracker()
    wins = []
    barrier = threading.Barrier(8)

    def claim():
        barrier.wait()
        if tracker.mark_if_new("https://example.com/shared"):
            wins.append(1)

    threads = [threading.Thread(target=claim) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(wins) == 1
