import numpy as np

import tensorflow as tf


def write_color_model(path, weights, size=48):
	"""
	Writes a .tflite model that averages each RGB channel over the picture
	and multiplies the result by `weights` (3 x num_labels).
	A solid red picture therefore scores exactly weights[0].
	"""
	weights = np.asarray(weights, dtype=np.float32)

	class ColorModel(tf.Module):
		def __init__(self):
			super().__init__()
			self.w = tf.constant(weights)

		@tf.function(input_signature=[tf.TensorSpec([1, size, size, 3], tf.float32)])
		def __call__(self, x):
			return tf.matmul(tf.reduce_mean(x, axis=[1, 2]), self.w)

	model = ColorModel()
	converter = tf.lite.TFLiteConverter.from_concrete_functions(
		[model.__call__.get_concrete_function()], model
	)
	path.write_bytes(converter.convert())
	return path
