from navalbattle.chat import ChatBox


def bound_chat(nick="alice"):
    chat = ChatBox(nick)
    sent = []
    chat.bind(sent.append)
    return chat, sent


def test_display_hidden_does_nothing():
    chat = ChatBox("alice")
    chat.display("hello")
    assert chat.lines == []


def test_display_message_format():
    chat, _ = bound_chat()
    chat.display_message("bob", "hi there")
    assert chat.lines == ["<bob> hi there"]


def test_send_line_notifies_and_displays():
    chat, sent = bound_chat("alice")
    chat.input = "hello"
    chat.send_line()
    assert sent == ["hello"]
    assert chat.lines == ["<alice> hello"]
    assert chat.input == ""
    assert chat.history == ["hello", ""]


def test_history_navigation():
    chat, _ = bound_chat()
    chat.input = "first"
    chat.send_line()
    chat.input = "second"
    chat.send_line()
    chat.key_up()
    assert chat.input == "second"
    chat.key_up()
    assert chat.input == "first"
    chat.key_up()
    assert chat.input == "first"
    chat.key_down()
    chat.key_down()
    assert chat.input == ""
    chat.key_down()
    assert chat.input == ""


def test_draft_is_kept_when_browsing():
    chat, _ = bound_chat()
    chat.input = "sent"
    chat.send_line()
    chat.input = "draft"
    chat.key_up()
    assert chat.input == "sent"
    chat.key_down()
    assert chat.input == "draft"


def test_bind_clears_transcript():
    chat, _ = bound_chat()
    chat.display("old")
    received = []
    chat.bind(received.append)
    assert chat.lines == []
    chat.input = "x"
    chat.send_line()
    assert received == ["x"]