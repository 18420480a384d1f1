from core import SessionState


def test_open_new_registers_and_resets_page(registry, clock):
    session = SessionState()
    session.open_new(registry, "/docs/a.pdf", "a.pdf")

    assert session.current_path == "/docs/a.pdf"
    assert session.current_page == 0
    assert [r.to_dict() for r in registry.list()] == [
        {"name": "a.pdf", "filepath": "/docs/a.pdf", "last_read": clock.now, "page_num": 0}
    ]

def test_open_new_second_document(registry, clock):
    session = SessionState()
    session.open_new(registry, "/docs/a.pdf", "a.pdf")
    clock.advance()
    session.open_new(registry, "/docs/b.pdf", "b.pdf")

    assert [r.filepath for r in registry.list()] == ["/docs/b.pdf", "/docs/a.pdf"]
    assert session.current_path == "/docs/b.pdf"

def test_switching_documents_remembers_page(registry, clock):
    session = SessionState()
    session.open_new(registry, "/docs/a.pdf", "a.pdf")
    session.navigate_next(10)
    session.navigate_next(10)
    clock.advance()
    session.open_new(registry, "/docs/b.pdf", "b.pdf")

    assert registry.get("/docs/a.pdf").page_num == 2

    clock.advance()
    session.open_recent(registry, "/docs/a.pdf")
    assert session.current_page == 2
    assert registry.list()[0].filepath == "/docs/a.pdf"

def test_open_recent_restores_page_and_refreshes(registry, clock):
    registry.upsert("/docs/a.pdf", "a.pdf")
    registry.save_page("/docs/a.pdf", 4)
    clock.advance()
    registry.upsert("/docs/b.pdf", "b.pdf")
    clock.advance()

    session = SessionState()
    session.open_recent(registry, "/docs/a.pdf")

    assert session.current_path == "/docs/a.pdf"
    assert session.current_page == 4
    rec = registry.list()[0]
    assert rec.filepath == "/docs/a.pdf"
    assert rec.last_read == clock.now
    assert rec.display_name == "a.pdf"

def test_open_recent_stale_entry_opens_as_new(registry):
    session = SessionState()
    session.open_recent(registry, "/docs/gone/report.pdf")

    assert session.current_path == "/docs/gone/report.pdf"
    assert session.current_page == 0
    rec = registry.get("/docs/gone/report.pdf")
    assert rec.display_name == "report.pdf"
    assert registry.count() == 1

def test_navigate_previous_stops_at_zero():
    session = SessionState(current_path="/docs/a.pdf", current_page=0)
    session.navigate_previous()
    assert session.current_page == 0

    session.current_page = 3
    session.navigate_previous()
    assert session.current_page == 2

def test_navigate_next_scenario():
    session = SessionState(current_path="/docs/a.pdf")
    session.navigate_next(5)
    assert session.current_page == 1
    for _ in range(4):
        session.navigate_next(5)
    assert session.current_page == 4
    session.navigate_next(5)
    assert session.current_page == 4

def test_navigate_next_without_pages_is_noop():
    session = SessionState(current_path="/docs/a.pdf", current_page=2)
    session.navigate_next(0)
    assert session.current_page == 2
    session.navigate_next(-1)
    assert session.current_page == 2

def test_navigate_next_clamps_when_document_shrank():
    session = SessionState(current_path="/docs/a.pdf", current_page=9)
    session.navigate_next(3)
    assert session.current_page == 2

def test_go_to_page_clamps():
    session = SessionState(current_path="/docs/a.pdf")
    session.go_to_page(7, 5)
    assert session.current_page == 4
    session.go_to_page(-3, 5)
    assert session.current_page == 0
    session.go_to_page(2, 0)
    assert session.current_page == 0

def test_page_label_is_one_based():
    session = SessionState(current_path="/docs/a.pdf", current_page=0)
    assert session.page_label(5) == "1 of 5"
    session.current_page = 4
    assert session.page_label(5) == "5 of 5"
    assert session.page_label(0) == "0 of 0"

def test_close_folds_page_and_clears(registry):
    session = SessionState()
    session.open_new(registry, "/docs/a.pdf", "a.pdf")
    session.go_to_page(6, 10)

    session.close(registry)

    assert registry.get("/docs/a.pdf").page_num == 6
    assert session.current_path is None
    assert session.current_page == 0

def test_close_readds_document_deleted_while_open(registry):
    session = SessionState()
    session.open_new(registry, "/docs/a.pdf", "Chapter 1")
    session.go_to_page(3, 10)
    registry.remove("/docs/a.pdf")

    session.close(registry)

    rec = registry.get("/docs/a.pdf")
    assert rec is not None
    assert rec.page_num == 3
    assert registry.count() == 1

def test_close_without_document_is_noop(registry):
    session = SessionState()
    session.close(registry)
    assert registry.count() == 0
