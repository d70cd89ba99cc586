import uuid

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.deps import client_ip
from app.db.session import get_db
from app.models.article_comment import ArticleComment
from app.models.article_like import ArticleLike
from app.models.news_article import NewsArticle
from app.schemas.public import ArticleCommentCreate, ArticleLikeCreate
from app.services.rate_limit import enforce_form_rate_limit
from app.services.serialization import row_to_dict

router = APIRouter()


def _article_or_404(db: Session, slug: str) -> NewsArticle:
    row = db.query(NewsArticle).filter(NewsArticle.slug == slug).first()
    if row is None:
        raise HTTPException(status_code=404, detail="Article not found")
    return row


def _like_count(db: Session, article_id) -> int:
    return int(db.query(func.count(ArticleLike.id)).filter(ArticleLike.article_id == article_id).scalar() or 0)


@router.get("")
def list_news(db: Session = Depends(get_db)):
    rows = db.query(NewsArticle).order_by(NewsArticle.date.desc(), NewsArticle.created_at.desc()).all()
    return [row_to_dict(r) for r in rows]


@router.get("/featured")
def featured_news(limit: int = Query(4, ge=1, le=20), db: Session = Depends(get_db)):
    rows = db.query(NewsArticle).order_by(NewsArticle.date.desc(), NewsArticle.created_at.desc()).limit(limit).all()
    return [row_to_dict(r) for r in rows]


@router.get("/categories")
def news_categories(db: Session = Depends(get_db)):
    rows = db.query(NewsArticle.category).group_by(NewsArticle.category).order_by(NewsArticle.category.asc()).all()
    return [category for (category,) in rows]


@router.get("/{slug}")
def get_article(slug: str, db: Session = Depends(get_db)):
    row = _article_or_404(db, slug)
    data = row_to_dict(row)
    data["likes"] = _like_count(db, row.id)
    return data


@router.get("/{slug}/comments")
def list_comments(slug: str, db: Session = Depends(get_db)):
    article = _article_or_404(db, slug)
    rows = (
        db.query(ArticleComment)
        .filter(ArticleComment.article_id == article.id, ArticleComment.is_approved.is_(True))
        .order_by(ArticleComment.created_at.asc())
        .all()
    )
    return [
        {
            "id": str(r.id),
            "parent_id": str(r.parent_id) if r.parent_id else None,
            "name": r.name,
            "content": r.content,
            "created_at": r.created_at.isoformat() if r.created_at else None,
        }
        for r in rows
    ]


@router.post("/{slug}/comments", status_code=201)
def create_comment(slug: str, payload: ArticleCommentCreate, request: Request, db: Session = Depends(get_db)):
    enforce_form_rate_limit("comment", client_ip(request))
    article = _article_or_404(db, slug)
    parent_id = None
    if payload.parent_id:
        try:
            parent_id = uuid.UUID(payload.parent_id)
        except ValueError:
            raise HTTPException(status_code=400, detail="Invalid parent comment")
        parent = db.get(ArticleComment, parent_id)
        if parent is None or parent.article_id != article.id:
            raise HTTPException(status_code=400, detail="Invalid parent comment")
    row = ArticleComment(
        article_id=article.id,
        parent_id=parent_id,
        name=payload.name,
        email=payload.email,
        content=payload.content,
        is_approved=False,
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    return {"id": str(row.id), "is_approved": False, "message": "Comment submitted for review"}


@router.post("/{slug}/likes")
def like_article(slug: str, payload: ArticleLikeCreate, db: Session = Depends(get_db)):
    article = _article_or_404(db, slug)
    exists = (
        db.query(ArticleLike.id)
        .filter(ArticleLike.article_id == article.id, ArticleLike.email == payload.email)
        .first()
    )
    if exists is None:
        db.add(ArticleLike(article_id=article.id, email=payload.email))
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
    return {"liked": True, "likes": _like_count(db, article.id)}
