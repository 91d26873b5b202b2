class DocumentId(str):
	""" Identity key of a document within its collection. Stored as the Mongo _id.
	Ids are always supplied by the caller, so an empty id is rejected rather than generated. """
	def __new__(cls, _id: str):
		if not isinstance(_id, str):
			raise TypeError(f"DocumentId must be a str, got {type(_id).__name__}.")
		if not _id:
			raise ValueError("DocumentId must not be empty.")
		instance = super().__new__(cls, _id)
		return instance
