class ImportPipelineError(Exception):
    pass


class UnsupportedStoreError(ImportPipelineError, ValueError):
    def __init__(self, store_id):
        self.store_id = store_id
        super().__init__(f"No scraper available for store: {store_id}")


class ImageDecodeError(ImportPipelineError, ValueError):
    pass
