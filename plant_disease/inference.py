# inference.py

import logging

import numpy as np
import tensorflow as tf

from plant_disease.adapter import InferenceAdapter
from plant_disease.errors import InvalidImage, ModelUnavailable

logger = logging.getLogger(__name__)


class TFLiteAdapter(InferenceAdapter):
	"""Runs a .tflite file with tf.lite.Interpreter."""

	def __init__(self, model_path, num_labels=None):
		self.model_path = model_path
		try:
			interpreter = tf.lite.Interpreter(model_path=str(model_path))
			interpreter.allocate_tensors()
		except (ValueError, OSError, RuntimeError) as e:
			logger.error("Model loading error (%s): %s", model_path, e)
			raise ModelUnavailable(f"Failed to load model {model_path}: {e}") from e

		self._input = interpreter.get_input_details()[0]
		self._output = interpreter.get_output_details()[0]
		self._interpreter = interpreter

		num_outputs = int(self._output["shape"][-1])
		if num_labels is not None and num_outputs != num_labels:
			self.close()
			raise ModelUnavailable(
				f"Model {model_path} gives {num_outputs} scores, expected {num_labels}"
			)
		logger.info(
			"Loaded %s (input %s, %d outputs)",
			model_path, list(self._input["shape"]), num_outputs,
		)

	@property
	def input_shape(self):
		return tuple(int(d) for d in self._input["shape"])

	def infer(self, tensor):
		if self._interpreter is None:
			raise ModelUnavailable("Interpreter has already been released")

		tensor = np.asarray(tensor, dtype=self._input["dtype"])
		expected = int(np.prod(self.input_shape))
		if tensor.size != expected:
			raise InvalidImage(f"Input tensor has {tensor.size} values, model expects {expected}")

		self._interpreter.set_tensor(self._input["index"], tensor.reshape(self.input_shape))
		self._interpreter.invoke()
		scores = self._interpreter.get_tensor(self._output["index"])
		return np.asarray(scores, dtype=np.float32).reshape(-1)

	def close(self):
		if self._interpreter is None:
			return
		self._interpreter = None
		logger.info("Released interpreter for %s", self.model_path)
