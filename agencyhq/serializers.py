"""
Converters from models and view objects to response dictionaries.
"""
from datetime import datetime
from typing import Optional

from .config import get_settings
from .models import Billing, Client, Post, Report
from .views import CalendarMonth, ClientIndex, derive_status
from .views.records import field

settings = get_settings()


def client_to_dict(client: Client, posts_count: Optional[int] = None) -> dict:
    data = {
        "id": client.id,
        "company_name": client.company_name,
        "user_email": client.user_email,
        "status": client.status,
        "company_objective": client.company_objective,
        "products_services": client.products_services,
        "target_audience": client.target_audience,
        "brand_voice": client.brand_voice,
        "brand_voice_custom": client.brand_voice_custom,
        "logo_url": client.logo_url,
        "created_date": client.created_date,
    }
    if posts_count is not None:
        data["posts_count"] = posts_count
    return data


def post_to_dict(post: Post, clients: Optional[ClientIndex] = None) -> dict:
    return {
        "id": post.id,
        "client_id": post.client_id,
        "client_name": clients.name(post.client_id, settings.client_placeholder) if clients else "",
        "title": post.title,
        "caption": post.caption,
        "media_url": post.media_url,
        "media_urls": post.media_urls or [],
        "media_type": post.media_type,
        "scheduled_date": post.scheduled_date,
        "scheduled_time": post.scheduled_time,
        "status": post.status,
        "platform": post.platform,
        "comments": post.comments or [],
    }


def calendar_item(post, clients: Optional[ClientIndex] = None) -> dict:
    client_id = field(post, "client_id")
    return {
        "id": field(post, "id"),
        "title": field(post, "title", ""),
        "status": field(post, "status", ""),
        "platform": field(post, "platform"),
        "client_id": client_id,
        "client_name": clients.name(client_id, settings.client_placeholder) if clients else "",
        "scheduled_date": field(post, "scheduled_date"),
        "scheduled_time": field(post, "scheduled_time"),
        "media_url": field(post, "media_url"),
    }


def calendar_to_dict(month: CalendarMonth, clients: Optional[ClientIndex] = None, degraded: bool = False) -> dict:
    preview = settings.calendar_preview_size
    prev_year, prev_month = month.previous
    next_year, next_month = month.next
    return {
        "year": month.year,
        "month": month.month,
        "leading_blanks": month.leading_blanks,
        "total": month.total,
        "previous": {"year": prev_year, "month": prev_month},
        "next": {"year": next_year, "month": next_month},
        "days": [
            {
                "date": bucket.day.isoformat(),
                "is_today": bucket.is_today,
                "count": len(bucket.posts),
                "posts": [calendar_item(p, clients) for p in bucket.preview(preview)],
                "more": bucket.overflow(preview),
            }
            for bucket in month.days
        ],
        "degraded": degraded,
    }


def report_to_dict(report: Report, clients: Optional[ClientIndex] = None) -> dict:
    return {
        "id": report.id,
        "client_id": report.client_id,
        "client_name": clients.name(report.client_id, settings.client_placeholder) if clients else "",
        "period_start": report.period_start,
        "period_end": report.period_end,
        "followers_gained": report.followers_gained,
        "total_impressions": report.total_impressions,
        "total_reach": report.total_reach,
        "total_messages": report.total_messages,
        "bio_link_clicks": report.bio_link_clicks,
        "engagement_rate": report.engagement_rate,
        "notes": report.notes,
    }


def billing_to_dict(billing: Billing, clients: Optional[ClientIndex] = None, now: Optional[datetime] = None) -> dict:
    return {
        "id": billing.id,
        "client_id": billing.client_id,
        "client_name": clients.name(billing.client_id, settings.client_placeholder) if clients else "",
        "description": billing.description,
        "amount": billing.amount,
        "due_date": billing.due_date,
        "status": derive_status(billing, now),
        "stored_status": billing.status,
        "recurrence": billing.recurrence,
        "payment_date": billing.payment_date,
        "notes": billing.notes,
    }
