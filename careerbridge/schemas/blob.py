from careerbridge.schemas.common import ApiModel


class StagedUploadResponse(ApiModel):
    path: str


class DashboardUploadResponse(ApiModel):
    resume: str | None = None
    cover_letter: str | None = None
    files: list[str] | None = None


class BlobUploadResponse(ApiModel):
    ref: str
    filename: str
    content_type: str


class ResolvedReference(ApiModel):
    kind: str
    url: str
