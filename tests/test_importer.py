from rocketreplay.telemetry.importer import TelemetryImporter
from rocketreplay.util.replay_config import ReplayConfig

GOOD = "0,0,10,0,0,-1,5,0,0\n0,0,9,0,0,-1,4,0,0\n0,0,8,0,0,-1,3,0,1\n"


def collect(importer: TelemetryImporter) -> dict[str, list]:
    seen: dict[str, list] = {"timeline": [], "error": [], "info": []}
    importer.timeline.connect(lambda v: seen["timeline"].append(v))
    importer.error.connect(lambda v: seen["error"].append(v))
    importer.info.connect(lambda v: seen["info"].append(v))
    return seen


def test_import_emits_timeline(qapp, tmp_path):
    path = tmp_path / "flight.csv"
    path.write_text(GOOD, encoding="utf-8")
    importer = TelemetryImporter(config=ReplayConfig(sample_interval_s=0.5, alert_duration_s=1.0))
    seen = collect(importer)

    importer.load(str(path))

    assert seen["error"] == []
    (timeline,) = seen["timeline"]
    assert len(timeline) == 3
    assert timeline.sample_interval == 0.5
    assert timeline.alert_duration == 1.0
    assert timeline.status(0.0).position.y == 10.0
    assert "3 samples" in seen["info"][0]


def test_malformed_file_emits_error_only(qapp, tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text(GOOD + "1,2,three,4,5,6,7,8,9\n", encoding="utf-8")
    importer = TelemetryImporter(config=ReplayConfig())
    seen = collect(importer)

    importer.load(str(path))

    assert seen["timeline"] == []
    (msg,) = seen["error"]
    assert "row 4" in msg


def test_missing_file_emits_error(qapp, tmp_path):
    importer = TelemetryImporter(config=ReplayConfig())
    seen = collect(importer)

    importer.load(str(tmp_path / "missing.csv"))

    assert seen["timeline"] == []
    assert len(seen["error"]) == 1


def test_empty_file_is_not_an_error(qapp, tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("\n", encoding="utf-8")
    importer = TelemetryImporter(config=ReplayConfig())
    seen = collect(importer)

    importer.load(str(path))

    assert seen["error"] == []
    (timeline,) = seen["timeline"]
    assert timeline.episodes == ()
    assert "no telemetry" in seen["info"][0]
