import datetime

import pytest

from taghelper import (
    ArgumentError,
    UsageConflictError,
    date_select_tag,
    image_tag,
    link_to,
    options_for_select,
    select_tag,
    text_field_tag,
)
from taghelper.html.element import ElementSerializer, Fragment, Text
from taghelper.html.tags import TagHelper


# image_tag


def test_image_tag_requires_src():
    with pytest.raises(ArgumentError):
        image_tag("")
    with pytest.raises(ArgumentError):
        image_tag(None)


def test_image_tag_derives_alt_from_filename():
    html = image_tag("photos/cat.jpg")
    assert html == '<img alt="cat" src="photos/cat.jpg">'
    assert "\n" not in html


def test_image_tag_without_extension_has_no_alt():
    assert image_tag("x") == '<img src="x">'


def test_image_tag_user_options_override_defaults():
    html = image_tag("photos/cat.jpg", {"alt": "A cat", "class": "thumb"})
    assert html == '<img alt="A cat" src="photos/cat.jpg" class="thumb">'


def test_image_tag_escapes_by_default():
    assert image_tag("a.png", {"alt": "<b>&"}) == '<img alt="&lt;b&gt;&amp;" src="a.png">'


def test_image_tag_escape_can_be_turned_off():
    html = image_tag("a.png", {"alt": "<b>", "escape_html": False})
    assert html == '<img alt="<b>" src="a.png">'
    assert "escape_html" not in html


def test_image_tag_strips_newlines():
    assert image_tag("a.png", {"title": "two\nlines"}) == (
        '<img alt="a" src="a.png" title="twolines">'
    )


# link_to


def test_link_to_requires_content():
    for content in ("", None, [], Text(""), Fragment()):
        with pytest.raises(ArgumentError):
            link_to(content)


def test_link_to_defaults_to_hash_href():
    assert link_to("Home") == '<a href="#">Home</a>'


def test_link_to_href_comes_first():
    html = link_to("Home", {"class": "nav", "href": "/"})
    assert html == '<a href="/" class="nav">Home</a>'


def test_link_to_rejects_popup_with_method():
    with pytest.raises(UsageConflictError):
        link_to("Click", {"popup": True, "method": "post"})


def test_link_to_confirm():
    html = link_to("Click", {"confirm": "Sure?"})
    assert html == '<a href="#" onclick="return confirm(\'Sure?\');">Click</a>'


def test_link_to_confirm_strips_quotes():
    html = link_to("Click", {"confirm": "Really 'delete'?"})
    assert "onclick=\"return confirm('Really delete?');\"" in html


def test_link_to_popup_with_window_settings():
    html = link_to("Help", {"href": "/help", "popup": ["help", "width=300"]})
    assert html == (
        '<a href="/help" onclick="window.open(this.href, \'help\', \'width=300\'); '
        'return false;">Help</a>'
    )


def test_link_to_method_posts_to_explicit_href():
    html = link_to("Delete", {"href": "/items/1", "method": "delete"})
    assert html.startswith('<a href="/items/1" onclick="var f = document.createElement')
    assert "f.action = '/items/1';" in html
    assert "m.setAttribute('value', 'delete');" in html
    assert html.endswith('f.submit(); return false;">Delete</a>')


def test_link_to_method_without_href_uses_this_href():
    html = link_to("Sign out", {"method": "post"})
    assert "f.action = this.href;" in html
    assert "_method" not in html


def test_link_to_keeps_existing_onclick():
    assert link_to("x", {"onclick": "track()"}) == '<a href="#" onclick="track()">x</a>'


def test_link_to_normalizes_boolean_attributes():
    html = link_to("x", {"disabled": True, "readonly": False})
    assert html == '<a href="#" disabled="disabled">x</a>'


def test_link_to_list_content_is_concatenated():
    assert link_to(["<b>", "Bold", "</b>"]) == '<a href="#"><b>Bold</b></a>'


def test_link_to_escape_html():
    assert link_to("<b>", {"escape_html": True}) == '<a href="#">&lt;b&gt;</a>'


def test_link_to_strips_newlines():
    assert link_to("one\ntwo") == '<a href="#">onetwo</a>'


def test_link_to_does_not_modify_caller_options():
    options = {"confirm": "Sure?", "popup": True, "disabled": False}
    link_to("x", options)
    assert options == {"confirm": "Sure?", "popup": True, "disabled": False}


# text_field_tag


def test_text_field_tag():
    html = text_field_tag("email")
    assert html == '<input name="email" id="email" type="text">'
    assert "\n" not in html


def test_text_field_tag_options():
    html = text_field_tag("email", {"id": "mail", "value": "a@b.c"})
    assert html == '<input name="email" id="mail" type="text" value="a@b.c">'


def test_text_field_tag_requires_name():
    with pytest.raises(ArgumentError):
        text_field_tag("")


# options_for_select / select_tag


def test_options_for_select_marks_selected_values():
    html = options_for_select(
        [{"title": "A", "value": "a"}, {"title": "B", "value": "b"}],
        ["b"],
    )
    assert html == (
        '<option value="a">A</option>\n'
        '<option value="b" selected="true">B</option>\n'
    )


def test_options_for_select_multiple_selected():
    html = options_for_select(
        [{"title": "A", "value": "a"}, {"title": "B", "value": "b"}],
        ["a", "b"],
    )
    assert html.count('selected="true"') == 2


def test_options_for_select_uses_list_membership():
    html = options_for_select([{"title": "A", "value": "a"}], "ab")
    assert "selected" not in html


def test_options_for_select_extra_keys_become_attributes():
    html = options_for_select([{"title": "A", "value": "a", "class": "x"}])
    assert html == '<option value="a" class="x">A</option>\n'


def test_options_for_select_does_not_modify_entries(colors):
    options_for_select(colors, ["red"])
    assert colors[0] == {"title": "Red", "value": "red"}


def test_select_tag_from_entries(colors):
    html_options = {"value": ["green"], "class": "pick"}
    html = select_tag("color", colors, html_options)
    assert html == (
        '<select name="color" id="color" class="pick">'
        '<option value="red">Red</option>\n'
        '<option value="green" selected="true">Green</option>\n'
        "</select>"
    )
    assert html_options == {"value": ["green"], "class": "pick"}


def test_select_tag_keeps_newlines_from_markup():
    markup = "<option>1</option>\n<option>2</option>\n"
    assert select_tag("n", markup) == (
        '<select name="n" id="n"><option>1</option>\n<option>2</option>\n</select>'
    )


def test_select_tag_without_options():
    assert select_tag("n") == '<select name="n" id="n"></select>'


def test_select_tag_requires_name(colors):
    with pytest.raises(ArgumentError):
        select_tag("", colors)


# date_select_tag


def _selects(html):
    parts = html.split("</select>")
    assert parts[-1] == ""
    return parts[:-1]


def test_date_select_tag_with_fixed_clock(helper):
    day, month, year = _selects(helper.date_select_tag("dob"))

    assert day.startswith('<select name="dob_day" id="dob_day">')
    assert day.count("<option") == 31
    assert '<option value="10" selected="true">10</option>' in day
    assert day.count("selected") == 1

    assert month.startswith('<select name="dob_month" id="dob_month">')
    assert month.count("<option") == 12
    assert '<option value="2" selected="true">2</option>' in month

    assert year.startswith('<select name="dob_year" id="dob_year">')
    assert year.count("<option") == 6
    assert '<option value="2024" selected="true">2024</option>' in year
    assert '<option value="2029">2029</option>' in year
    assert "2030" not in year


def test_date_select_tag_days_ignore_month_length(helper):
    day, _, _ = _selects(
        helper.date_select_tag("d", {"selected_date": datetime.date(2023, 2, 1)})
    )
    assert '<option value="31">31</option>' in day


def test_date_select_tag_shares_residual_attributes(helper):
    html = helper.date_select_tag("dob", {"class": "date", "id": "birth"})
    day, month, year = _selects(html)
    assert day.startswith('<select name="dob_day" id="birth_day" class="date">')
    assert month.startswith('<select name="dob_month" id="birth_month" class="date">')
    assert year.startswith('<select name="dob_year" id="birth_year" class="date">')


def test_date_select_tag_year_range_and_selected_date(helper):
    html = helper.date_select_tag(
        "dob",
        {
            "year_start": 1990,
            "year_end": 1992,
            "selected_date": datetime.date(1991, 12, 31),
        },
    )
    day, month, year = _selects(html)
    assert '<option value="31" selected="true">31</option>' in day
    assert '<option value="12" selected="true">12</option>' in month
    assert year.endswith(
        '<option value="1990">1990</option>'
        '<option value="1991" selected="true">1991</option>'
        '<option value="1992">1992</option>'
    )
    assert "year_start" not in html
    assert "selected_date" not in html


def test_date_select_tag_year_end_follows_year_start(helper):
    _, _, year = _selects(helper.date_select_tag("d", {"year_start": 2000}))
    assert year.count("<option") == 6
    assert '<option value="2005">2005</option>' in year


def test_date_select_tag_uses_system_clock_by_default():
    today = datetime.date.today()
    _, _, year = _selects(date_select_tag("dob"))
    assert f'<option value="{today.year}" selected="true">' in year
    assert f'<option value="{today.year + 5}">' in year


def test_date_select_tag_requires_name(helper):
    with pytest.raises(ArgumentError):
        helper.date_select_tag("")


# idempotence


def test_builders_are_idempotent(helper, colors):
    calls = [
        lambda: helper.image_tag("photos/cat.jpg", {"class": "thumb"}),
        lambda: helper.link_to("x", {"confirm": "ok?", "method": "put"}),
        lambda: helper.text_field_tag("q"),
        lambda: helper.select_tag("c", colors, {"value": ["red"]}),
        lambda: helper.date_select_tag("d"),
    ]
    for call in calls:
        assert call() == call()


def test_link_to_confirm_with_non_string_value():
    assert link_to("x", {"confirm": 1}) == (
        '<a href="#" onclick="return confirm(\'1\');">x</a>'
    )


def test_date_select_tag_none_selected_date_means_today(helper):
    day, month, year = _selects(helper.date_select_tag("dob", {"selected_date": None}))
    assert '<option value="10" selected="true">10</option>' in day
    assert '<option value="2" selected="true">2</option>' in month
    assert '<option value="2024" selected="true">2024</option>' in year


class RecordingSerializer(ElementSerializer):
    def __init__(self):
        self.tags = []

    def serialize_tag(self, tag, escape_chars=""):
        self.tags.append(tag)
        return super().serialize_tag(tag, escape_chars)


def test_builders_serialize_through_tags(clock):
    serializer = RecordingSerializer()
    helper = TagHelper(serializer=serializer, clock=clock)
    helper.image_tag("a.png")
    helper.link_to("x")
    helper.text_field_tag("q")
    helper.select_tag("c", [{"title": "A", "value": "a"}])
    assert [tag.name for tag in serializer.tags] == ["img", "a", "input", "option", "select"]
    assert serializer.tags[1].content == Text("x")
