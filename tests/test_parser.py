from sales_total.parser import detect_delimiter, parse, split_fields, unquote_field


def test_header_detection():
    table = parse("Products,Sales\nPhones,1000\nBooks,123.45\nNotebooks,111.11\n")
    assert table.headers == ["Products", "Sales"]
    assert table.rows == [["Phones", "1000"], ["Books", "123.45"], ["Notebooks", "111.11"]]


def test_numeric_first_row_is_data():
    table = parse("1,2\n3,4\n")
    assert table.headers is None
    assert table.rows == [["1", "2"], ["3", "4"]]


def test_one_numeric_header_field_makes_first_row_data():
    table = parse("Item,2024\nA,5\n")
    assert table.headers is None
    assert table.rows[0] == ["Item", "2024"]


def test_empty_and_whitespace_input():
    for text in ("", "   \n\t\n\r\n"):
        table = parse(text)
        assert table.headers is None
        assert table.rows == []


def test_line_endings_and_blank_lines():
    table = parse("Item,Sales\r\nA,1\r\rB,2\r\n  \n")
    assert table.headers == ["Item", "Sales"]
    assert table.rows == [["A", "1"], ["B", "2"]]


def test_delimiter_detection():
    assert detect_delimiter("a,b;c,d,e") == ","
    assert detect_delimiter("a;b;c,d") == ";"
    assert detect_delimiter("a\tb\tc") == "\t"
    assert detect_delimiter("abc") == ","
    assert detect_delimiter("a,b;c") == ","
    assert detect_delimiter("a;b\tc") == ";"


def test_delimiter_comes_from_first_line_only():
    table = parse("Item;Sales\nA;1,5\n")
    assert table.rows == [["A", "1,5"]]


def test_tab_separated():
    table = parse("Item\tSales\nA\t7\n")
    assert table.headers == ["Item", "Sales"]
    assert table.rows == [["A", "7"]]


def test_quoted_field_unescaping():
    assert unquote_field('"12""3"""') == '12"3"'
    assert unquote_field('"Phones"') == "Phones"
    assert unquote_field('"') == ""
    assert unquote_field('ab"c') == 'ab"c'
    assert unquote_field('"abc') == '"abc'


def test_delimiter_inside_quotes_still_splits():
    assert split_fields('"a,b",1', ",") == ['"a', 'b"', "1"]


def test_single_column_and_ragged_rows():
    table = parse("Sales\n1\n2\n")
    assert table.headers == ["Sales"]
    assert table.rows == [["1"], ["2"]]

    ragged = parse("Item,Sales\nA\nB,2,extra\n")
    assert ragged.rows == [["A"], ["B", "2", "extra"]]
