import io

import pytest
from PIL import Image

from plant_disease.adapter import InferenceAdapter


class FakeAdapter(InferenceAdapter):
	"""Returns canned scores and remembers what it was fed."""

	def __init__(self, scores):
		self.scores = scores
		self.calls = []
		self.closed = 0

	def infer(self, tensor):
		self.calls.append(tensor)
		return self.scores

	def close(self):
		self.closed += 1


@pytest.fixture
def fake_adapter():
	return FakeAdapter


@pytest.fixture
def leaf():
	# green-ish gradient, not square
	img = Image.new("RGB", (120, 80))
	img.putdata([(x % 256, 150, (x * 3) % 256) for x in range(120 * 80)])
	return img


@pytest.fixture
def jpeg_bytes(leaf):
	buf = io.BytesIO()
	leaf.save(buf, format="JPEG")
	return buf.getvalue()
