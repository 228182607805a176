from pydantic import BaseModel, ConfigDict


class UploadContext(BaseModel):
    model_config = ConfigDict(frozen=True)

    repository: str
    commit: str
    file: str
    root: str                         # normalized, "" = repository root
    github_token: str = ""
    indexer_name: str = ""


class UploadRequest(BaseModel):
    url: str
    headers: dict[str, str]
    file: str


class RenderedCommand(BaseModel):
    text: str


class UploadResult(BaseModel):
    upload_id: str
    reference: str
    status_url: str
