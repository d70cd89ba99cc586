from fastapi import Depends
from sqlalchemy.orm import Session

from app.api.admin.crud import ContentTable, build_crud_router
from app.core.deps import get_current_admin
from app.db.session import get_db
from app.models.article_comment import ArticleComment
from app.services.serialization import load_row_or_404, row_to_dict

COMMENTS = ContentTable(
    model=ArticleComment,
    label="Comment",
    searchable_fields=("name", "email", "content"),
)

router = build_crud_router(COMMENTS, writable=False)


@router.put("/{row_id}/approve")
def approve_comment(row_id: str, db: Session = Depends(get_db), admin: dict = Depends(get_current_admin)):
    row = load_row_or_404(db, ArticleComment, row_id, COMMENTS.not_found)
    row.is_approved = True
    db.add(row); db.commit(); db.refresh(row)
    return row_to_dict(row)
