"""FastAPI upload endpoint for the document analyzer.

Endpoints:
  POST /process  -> multipart upload, returns the processed document as JSON
  GET  /formats  -> supported formats
  GET  /health   -> {'status': 'ok'}
"""

import asyncio
from typing import Any, Dict

from fastapi import FastAPI, File, UploadFile
from fastapi.responses import JSONResponse

from .config import MAX_UPLOAD_BYTES, PROCESSING_TIMEOUT
from .error_handler import log_error
from .exceptions import DocumentAnalyzerError, ExtractionFailedError, UnsupportedFormatError
from .extractors import supported_formats
from .logging_config import get_logger
from .processor import DocumentProcessor

logger = get_logger(__name__)

app = FastAPI(title="Document Analyzer", version="0.1.0")
processor = DocumentProcessor()


def _error_response(status_code: int, error: DocumentAnalyzerError) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={
        "error_code": error.error_code,
        "message": error.message,
        "supported_formats": list(supported_formats()),
    })


@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "ok"}


@app.get("/formats")
def formats() -> Dict[str, Any]:
    return {"formats": list(supported_formats()), "max_upload_bytes": MAX_UPLOAD_BYTES}


@app.post("/process")
async def process(file: UploadFile = File(...)):
    data = await file.read()
    if len(data) > MAX_UPLOAD_BYTES:
        return JSONResponse(status_code=413, content={
            "error_code": "FileTooLarge",
            "message": f"File exceeds the {MAX_UPLOAD_BYTES} byte upload limit",
            "supported_formats": list(supported_formats()),
        })

    try:
        doc = await processor.process_document_async(
            data, file.filename or "", file.content_type, timeout=PROCESSING_TIMEOUT
        )
    except UnsupportedFormatError as e:
        log_error(e, "Upload rejected")
        return _error_response(415, e)
    except ExtractionFailedError as e:
        log_error(e, "Upload could not be extracted")
        return _error_response(422, e)
    except asyncio.TimeoutError:
        logger.error(f"Processing {file.filename} exceeded {PROCESSING_TIMEOUT}s")
        return JSONResponse(status_code=504, content={
            "error_code": "ProcessingTimeout",
            "message": f"Processing exceeded {PROCESSING_TIMEOUT} seconds",
            "supported_formats": list(supported_formats()),
        })

    return doc.to_dict()


if __name__ == "__main__":
    import uvicorn
    from .config import API_HOST, API_PORT
    uvicorn.run("docanalyzer.api:app", host=API_HOST, port=API_PORT, reload=True)
