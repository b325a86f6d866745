import os

import pytest

from reelcraft.ai.video_generation import (
    ExtendVideoParameters,
    GeneratedVideo,
    SceneHistory,
    build_submission_payload,
)
from reelcraft.ai.video_generation._resolver import materialize
from reelcraft.core.exceptions import NotFoundError, ValidationError

from ._providers import VIDEO_CONTENT, VIDEO_URI, image


@pytest.fixture
def make_result(tmp_path):
    def make():
        return materialize(
            GeneratedVideo(uri=VIDEO_URI, media_type="video/mp4"),
            VIDEO_CONTENT,
            output_dir=str(tmp_path),
        )

    return make


def test_add_and_list(make_result):
    history = SceneHistory()
    first = history.add(make_result(), prompt="first")
    second = history.add(make_result(), prompt="second")
    assert [s.id for s in history.list()] == [second.id, first.id]
    assert history.get(first.id).prompt == "first"
    assert first.extendable


def test_extend(make_result):
    history = SceneHistory()
    scene = history.add(make_result(), prompt="a boat")
    params = history.extend(scene.id, "the boat sails away")
    assert isinstance(params, ExtendVideoParameters)
    assert params.video_reference.uri == VIDEO_URI
    assert params.input_video.get_bytes() == VIDEO_CONTENT
    payload = build_submission_payload(params)
    assert payload.video.uri == VIDEO_URI


def test_extend_with_end_frame(make_result):
    history = SceneHistory()
    scene = history.add(make_result())
    params = history.extend(
        scene.id, "the boat docks", end_frame=image(b"dock")
    )
    assert params.end_frame is not None


def test_scene_without_reference(make_result):
    history = SceneHistory()
    scene = history.add_file(make_result().path, prompt="uploaded")
    assert not scene.extendable
    with pytest.raises(ValidationError) as exc_info:
        history.extend(scene.id, "more")
    assert str(exc_info.value).startswith("Video data lost.")


def test_limit_releases_oldest(make_result):
    history = SceneHistory(limit=2)
    oldest = history.add(make_result())
    history.add(make_result())
    history.add(make_result())
    assert len(history.list()) == 2
    assert not os.path.exists(oldest.path)
    with pytest.raises(NotFoundError):
        history.get(oldest.id)


def test_remove_and_clear(make_result):
    history = SceneHistory()
    removed = history.add(make_result())
    kept = history.add(make_result())
    history.remove(removed.id)
    assert not os.path.exists(removed.path)
    assert [s.id for s in history.list()] == [kept.id]
    history.clear()
    assert history.list() == []
    assert not os.path.exists(kept.path)


def test_remove_file_scene_keeps_file(make_result):
    history = SceneHistory()
    path = make_result().path
    scene = history.add_file(path)
    history.remove(scene.id)
    assert os.path.exists(path)


def test_extend_after_file_moved(make_result, tmp_path):
    history = SceneHistory()
    result = make_result()
    scene = history.add(result, prompt="a boat")
    os.replace(result.path, tmp_path / "kept.mp4")
    params = history.extend(scene.id, "the boat sails away")
    assert params.input_video is None
    assert params.video_reference.uri == VIDEO_URI
    assert build_submission_payload(params).video.uri == VIDEO_URI
