from sqlalchemy import Column, String, Integer, BigInteger, DateTime, ForeignKey, LargeBinary
from sqlalchemy.orm import relationship

from careerbridge.database import Base


class BlobFile(Base):
    """Content-addressed object header; payload lives in ordered BlobChunk rows."""

    __tablename__ = "blob_files"

    id = Column(String(24), primary_key=True)
    filename = Column(String, nullable=False)
    content_type = Column(String, nullable=False, default="application/octet-stream")
    length = Column(BigInteger, nullable=False, default=0)
    chunk_size = Column(Integer, nullable=False)
    uploaded_at = Column(DateTime(timezone=True), nullable=False)

    chunks = relationship(
        "BlobChunk",
        back_populates="file",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="BlobChunk.n",
    )


class BlobChunk(Base):
    __tablename__ = "blob_chunks"

    file_id = Column(String(24), ForeignKey("blob_files.id", ondelete="CASCADE"), primary_key=True)
    n = Column(Integer, primary_key=True)
    data = Column(LargeBinary, nullable=False)

    file = relationship("BlobFile", back_populates="chunks")
