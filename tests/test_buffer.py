from vimlet import TextBuffer


def test_new_buffer_has_one_empty_line():
    """A fresh buffer holds a single empty line and is clean."""
    buf = TextBuffer()
    assert buf.line_count() == 1
    assert buf.line_text(0) == ""
    assert buf.line_length(0) == 0
    assert buf.is_empty()
    assert not buf.dirty


def test_empty_line_list_still_has_one_line():
    """An empty list of lines still yields one line."""
    buf = TextBuffer([])
    assert buf.line_count() == 1
    assert buf.lines() == [""]


def test_insert_char_before_column():
    """Inserting puts the character before the given column."""
    buf = TextBuffer(["ac"])
    buf.insert_char(0, 1, "b")
    assert buf.line_text(0) == "abc"
    assert buf.dirty


def test_insert_char_at_end_of_line():
    """Inserting at the line length appends."""
    buf = TextBuffer(["ab"])
    buf.insert_char(0, 2, "c")
    assert buf.line_text(0) == "abc"


def test_delete_char_before_removes_left_character():
    """Backspace removes the character left of the column."""
    buf = TextBuffer(["abc"])
    buf.delete_char_before(0, 2)
    assert buf.line_text(0) == "ac"
    assert buf.dirty


def test_delete_char_before_at_column_zero_is_noop():
    """Deleting before column 0 changes nothing and stays clean."""
    buf = TextBuffer(["abc", "def"])
    buf.delete_char_before(1, 0)
    assert buf.lines() == ["abc", "def"]
    assert not buf.dirty


def test_split_line_in_middle():
    """Splitting moves the tail to a new line below."""
    buf = TextBuffer(["hello world"])
    buf.split_line(0, 5)
    assert buf.lines() == ["hello", " world"]
    assert buf.dirty


def test_split_line_at_end_adds_empty_line():
    """Splitting at the end inserts an empty line."""
    buf = TextBuffer(["abc", "next"])
    buf.split_line(0, 3)
    assert buf.lines() == ["abc", "", "next"]


def test_join_with_previous_returns_previous_length():
    """Joining reports where the cursor belongs afterwards."""
    buf = TextBuffer(["abc", "def", "ghi"])
    prev_len = buf.join_with_previous(1)
    assert prev_len == 3
    assert buf.lines() == ["abcdef", "ghi"]
    assert buf.dirty


def test_join_first_line_is_noop():
    """The first line has nothing to join with."""
    buf = TextBuffer(["abc", "def"])
    assert buf.join_with_previous(0) == 0
    assert buf.lines() == ["abc", "def"]
    assert not buf.dirty


def test_join_last_remaining_break_leaves_one_line():
    """Joining the last two lines leaves exactly one."""
    buf = TextBuffer(["", ""])
    buf.join_with_previous(1)
    assert buf.lines() == [""]
    assert buf.line_count() == 1


def test_lines_returns_a_copy():
    """Mutating the returned list does not touch the buffer."""
    buf = TextBuffer(["abc"])
    lines = buf.lines()
    lines.append("mutated")
    assert buf.line_count() == 1


def test_save_without_filename_returns_false():
    """A buffer with no save target refuses to save."""
    buf = TextBuffer(["abc"])
    buf.insert_char(0, 0, "x")
    assert buf.save() is False
    assert buf.dirty
