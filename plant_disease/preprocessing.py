# preprocessing.py

import io
import os
import logging

import numpy as np
from PIL import Image, ImageOps

from plant_disease.config import INPUT_SIZE
from plant_disease.errors import InvalidImage

logger = logging.getLogger(__name__)


def load_image(source, max_side=None):
	"""
	Decode a leaf picture into an RGB PIL image.

	- source: raw bytes, a filesystem path, or a file-like object
	  (e.g. what st.file_uploader / st.camera_input hand back).
	- max_side: if given, let the decoder pick a cheaper reduced size that is
	  still at least this large (only JPEG supports it; other formats decode
	  in full). Used for big camera captures.
	Raises InvalidImage if the data is not a readable image.
	"""
	if isinstance(source, (bytes, bytearray)):
		source = io.BytesIO(source)
	elif isinstance(source, os.PathLike):
		source = os.fspath(source)

	try:
		img = Image.open(source)
		if max_side:
			img.draft("RGB", (max_side, max_side))
		img = ImageOps.exif_transpose(img)
		img.load()
	except (OSError, ValueError, Image.DecompressionBombError) as e:
		logger.warning("Could not decode image: %s", e)
		raise InvalidImage(f"Could not decode image: {e}") from e

	return img.convert("RGB")


def preprocess(image, size=INPUT_SIZE):
	"""
	Turn a leaf picture into the flat float32 buffer the model reads.

	The picture is stretched to size×size (bilinear), then every pixel is
	written as R, G, B in row-major order, each divided by 255.
	Returns a 1-D array of exactly 3*size*size values in [0, 1].
	"""
	if not isinstance(image, Image.Image):
		image = load_image(image)

	width, height = image.size
	if width <= 0 or height <= 0:
		raise InvalidImage(f"Image has no pixels ({width}x{height})")

	img = image.convert("RGB").resize((size, size), Image.Resampling.BILINEAR)
	arr = np.asarray(img, dtype=np.float32) / 255.0  # (size, size, 3)
	return arr.reshape(-1)
