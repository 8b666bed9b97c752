import fire
import pytest

from taghelper import cli
from taghelper.errors import ArgumentError, UsageConflictError


def test_image_command_passes_extra_flags_as_attributes():
    assert cli.image("photos/cat.jpg", **{"class": "thumb"}) == (
        '<img alt="cat" src="photos/cat.jpg" class="thumb">'
    )


def test_link_command():
    assert cli.link("Home", href="/") == '<a href="/">Home</a>'


def test_link_command_propagates_usage_errors():
    with pytest.raises(UsageConflictError):
        cli.link("Click", popup=True, method="post")


def test_text_field_command_propagates_argument_errors():
    with pytest.raises(ArgumentError):
        cli.text_field("")


def test_select_command():
    html = cli.select("c", [{"title": "Red", "value": "red"}], value=["red"])
    assert html == (
        '<select name="c" id="c"><option value="red" selected="true">Red</option>\n</select>'
    )


def test_preview_command(tmp_path):
    assert cli.preview(str(tmp_path)) == str(tmp_path / "index.html")


def test_fire_dispatch(capsys):
    result = fire.Fire(cli.COMMANDS, command=["text_field", "email"])
    assert result == '<input name="email" id="email" type="text">'


def test_fire_dispatch_bare_confirm_flag(capsys):
    result = fire.Fire(cli.COMMANDS, command=["link", "Del", "--confirm"])
    assert result == '<a href="#" onclick="return confirm(\'True\');">Del</a>'
