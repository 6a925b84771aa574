from __future__ import annotations
import hmac
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Header, HTTPException
from sqlalchemy import func
from sqlalchemy.orm import Session

from ..db import get_db
from ..models import QuizResult
from ..questions import TIERS
from ..scoring import recent_results, session_analytics
from ..settings import settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["admin"])

RESULTS_LIMIT = 50
ANALYTICS_LIMIT = 100


def require_admin_key(x_api_key: Optional[str] = Header(default=None)) -> None:
	if not settings.admin_api_key:
		return
	if not hmac.compare_digest((x_api_key or "").encode(), settings.admin_api_key.encode()):
		raise HTTPException(status_code=401, detail="Invalid API key")


@router.get("/admin-stats", dependencies=[Depends(require_admin_key)])
def admin_stats(db: Session = Depends(get_db)):
	try:
		total = db.query(func.count(QuizResult.id)).scalar() or 0
		counts = dict(db.query(QuizResult.level, func.count(QuizResult.id)).group_by(QuizResult.level).all())
		results = recent_results(db, RESULTS_LIMIT)
		analytics = session_analytics(db, None, ANALYTICS_LIMIT)
		return {
			"totalQuizzes": total,
			"results": [row.to_dict() for row in results],
			"analytics": [row.to_dict() for row in analytics],
			"levelDistribution": {level: counts.get(level, 0) for level in TIERS},
		}
	except Exception:
		logger.exception("admin stats query failed")
		raise HTTPException(status_code=500, detail="Failed to fetch statistics")
