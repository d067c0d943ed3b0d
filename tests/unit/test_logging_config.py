import os

from nurse_connect.core.logging_config import build_logging_config


def test_files_live_under_log_dir(tmp_path):
    config = build_logging_config(str(tmp_path), "DEBUG")

    filenames = {
        name: handler["filename"]
        for name, handler in config["handlers"].items()
        if "filename" in handler
    }
    assert filenames == {
        "app_file": os.path.join(str(tmp_path), "nurse.log"),
        "error_file": os.path.join(str(tmp_path), "error.log"),
        "access_file": os.path.join(str(tmp_path), "access.log"),
    }
    assert config["handlers"]["error_file"]["level"] == "ERROR"
    assert config["root"]["level"] == "DEBUG"


def test_access_lines_do_not_reach_root():
    config = build_logging_config("logs", "INFO")
    assert config["loggers"]["access"]["propagate"] is False
    assert "access_file" in config["loggers"]["access"]["handlers"]
