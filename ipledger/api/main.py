from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ipledger.api.config import configure_logging, get_allowed_origins
from ipledger.api.routes.attorneys import router as attorneys_router
from ipledger.api.routes.cases import router as cases_router
from ipledger.api.routes.patents import router as patents_router

configure_logging()

app = FastAPI(
    title="Patent Dispute Ledger API",
    description="Permissioned ledger of patent-infringement cases and verified IP attorneys",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_allowed_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(attorneys_router, prefix="/api", tags=["Attorneys"])
app.include_router(cases_router, prefix="/api", tags=["Cases"])
app.include_router(patents_router, prefix="/api", tags=["Patents"])

@app.get("/health")
def health():
    return {"status": "Up and running!"}
