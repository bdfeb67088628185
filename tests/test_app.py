from pathlib import Path

import numpy as np
import pytest

pytest.importorskip("tensorflow")
pytest.importorskip("streamlit")

from streamlit.testing.v1 import AppTest

from plant_disease import config
from plant_disease.labels import LABELS
from tflite_models import write_color_model

APP = str(Path(__file__).parent.parent / "app.py")


def test_missing_model_is_reported(monkeypatch, tmp_path):
	monkeypatch.setattr(config, "MODEL_PATH", str(tmp_path / "plant_model.tflite"))

	at = AppTest.from_file(APP, default_timeout=60).run()

	assert not at.exception
	assert [e.value for e in at.error] == ["Failed to load model."]
	assert len(at.radio) == 0


def test_waits_for_a_picture(monkeypatch, tmp_path):
	path = write_color_model(tmp_path / "plant_model.tflite", np.eye(3, len(LABELS)))
	monkeypatch.setattr(config, "MODEL_PATH", str(path))

	at = AppTest.from_file(APP, default_timeout=60).run()

	assert not at.exception
	assert len(at.error) == 0
	assert any("Please select a leaf image" in m.value for m in at.markdown)

	at.radio[0].set_value("Capture photo").run()

	assert any("Camera permission" in c.value for c in at.caption)
