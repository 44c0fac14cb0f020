import pytest
from PIL import Image

from anysticker.core import OutputFormat, ProcessingOptions
from anysticker.core.batch import process_directory, summarize
from anysticker.core.errors import OutputIOError


def _populate(make_image, make_gif, tmp_path):
    make_image("a.png", size=(100, 100))
    make_image("b.jpg", size=(1000, 250))
    make_gif("c.gif")
    (tmp_path / "d.png").write_bytes(b"definitely not a png")


def test_batch_isolates_corrupt_file(make_image, make_gif, tmp_path):
    _populate(make_image, make_gif, tmp_path)
    output_dir = tmp_path / "stickers"

    results = process_directory(tmp_path, output_dir, ProcessingOptions())

    assert len(results) == 4
    failures = [r for r in results if not r.success]
    assert len(failures) == 1
    assert failures[0].input_path.name == "d.png"
    assert failures[0].error
    assert failures[0].error_kind == "DecodeError"
    assert sorted(p.name for p in output_dir.iterdir()) == ["a.png", "b.png", "c.png"]
    with Image.open(output_dir / "b.png") as sticker:
        assert sticker.size == (512, 128)


def test_batch_results_follow_sorted_order(make_image, make_gif, tmp_path):
    _populate(make_image, make_gif, tmp_path)
    results = process_directory(tmp_path, tmp_path / "out", ProcessingOptions())
    assert [r.input_path.name for r in results] == ["a.png", "b.jpg", "c.gif", "d.png"]
    assert [r.output_path.name for r in results] == ["a.png", "b.png", "c.png", "d.png"]


def test_batch_honours_pattern(make_image, make_gif, tmp_path):
    _populate(make_image, make_gif, tmp_path)
    options = ProcessingOptions(pattern="*.JPG")
    results = process_directory(tmp_path, tmp_path / "out", options)
    assert [r.input_path.name for r in results] == ["b.jpg"]
    assert results[0].success


def test_batch_uses_format_suffix(make_image, tmp_path):
    make_image("a.png")
    options = ProcessingOptions(output_format=OutputFormat.WEBP, pattern="*.png")
    results = process_directory(tmp_path, tmp_path / "out", options)
    assert results[0].output_path == tmp_path / "out" / "a.webp"


def test_batch_creates_output_directory_even_without_matches(tmp_path):
    output_dir = tmp_path / "nested" / "out"
    assert process_directory(tmp_path, output_dir, ProcessingOptions(pattern="*.png")) == []
    assert output_dir.is_dir()


def test_batch_fails_when_output_directory_cannot_be_created(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("file in the way")
    with pytest.raises(OutputIOError):
        process_directory(tmp_path, blocker / "out", ProcessingOptions())


def test_batch_reports_progress(make_image, tmp_path):
    make_image("a.png")
    make_image("b.png")
    calls = []
    process_directory(
        tmp_path,
        tmp_path / "out",
        ProcessingOptions(pattern="*.png"),
        progress=lambda index, total, path: calls.append((index, total, path.name)),
    )
    assert calls == [(1, 2, "a.png"), (2, 2, "b.png")]


def test_summarize_counts(make_image, make_gif, tmp_path):
    _populate(make_image, make_gif, tmp_path)
    summary = summarize(process_directory(tmp_path, tmp_path / "out", ProcessingOptions()))
    assert (summary.total, summary.succeeded, summary.failed) == (4, 3, 1)
