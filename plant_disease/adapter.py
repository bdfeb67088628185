# adapter.py


class InferenceAdapter:
	"""
	The only thing the classifier knows about the model:
	a flat input tensor goes in, one score per label comes out.
	Any backend can sit behind it; use it as a context manager so it is
	released once you are done.
	"""

	def infer(self, tensor):
		raise NotImplementedError

	def close(self):
		pass

	def __enter__(self):
		return self

	def __exit__(self, exc_type, exc, tb):
		self.close()
		return False
