from datetime import date, timedelta

from agencyhq.database import SessionLocal, engine, Base
from agencyhq.models import Billing, Client, Post, Report

# Create tables
Base.metadata.create_all(bind=engine)

db = SessionLocal()

# Clear existing data
db.query(Post).delete()
db.query(Report).delete()
db.query(Billing).delete()
db.query(Client).delete()

today = date.today()


def day(offset):
    return (today + timedelta(days=offset)).isoformat()


# Sample clients
clients = [
    Client(
        company_name="Acme Coffee",
        user_email="owner@acmecoffee.com",
        status="active",
        company_objective="Grow foot traffic at the new downtown store",
        target_audience="Students and remote workers",
        brand_voice="informal",
    ),
    Client(
        company_name="Beta Bakery",
        user_email="hello@betabakery.com",
        status="active",
        products_services="Sourdough, pastries and custom cakes",
        brand_voice="amigável",
    ),
    Client(
        company_name="Gamma Gym",
        user_email="team@gammagym.fit",
        status="inactive",
        brand_voice="inspirador",
    ),
]
db.add_all(clients)
db.flush()
acme, beta, gamma = clients

# Sample posts
posts = [
    Post(client_id=acme.id, title="Opening week teaser", status="approved",
         scheduled_date=day(0), scheduled_time="09:00", platform="instagram"),
    Post(client_id=acme.id, title="Barista spotlight", status="production",
         scheduled_date=day(3), platform="instagram", media_type="video"),
    Post(client_id=acme.id, title="Latte art carousel", status="scheduled",
         scheduled_date=day(5), media_type="carousel",
         media_urls=["/uploads/demo-1.jpg", "/uploads/demo-2.jpg"]),
    Post(client_id=beta.id, title="Weekend sourdough drop", status="posted",
         scheduled_date=day(-2), platform="facebook"),
    Post(client_id=beta.id, title="Cake of the month", status="idea"),
    Post(client_id=gamma.id, title="January challenge", status="posted",
         scheduled_date=day(-40), platform="tiktok"),
]

# Sample weekly reports
reports = [
    Report(client_id=acme.id, period_start=day(-14), period_end=day(-8),
           followers_gained=85, total_impressions=12400, total_reach=6100,
           total_messages=14, bio_link_clicks=52, engagement_rate=4.2),
    Report(client_id=acme.id, period_start=day(-7), period_end=day(-1),
           followers_gained=130, total_impressions=18900, total_reach=8700,
           total_messages=22, bio_link_clicks=71, engagement_rate=5.1),
    Report(client_id=beta.id, period_start=day(-7), period_end=day(-1),
           followers_gained=40, total_impressions=5200, total_reach=2900,
           total_messages=6, bio_link_clicks=18, engagement_rate=3.4),
]

# Sample charges
billings = [
    Billing(client_id=acme.id, description="Monthly retainer", amount=1500,
            due_date=day(10), status="pending", recurrence="monthly"),
    Billing(client_id=beta.id, description="Monthly retainer", amount=900,
            due_date=day(-5), status="pending", recurrence="monthly"),
    Billing(client_id=beta.id, description="Launch campaign", amount=600,
            due_date=day(-20), status="paid", recurrence="once",
            payment_date=day(-18)),
]

db.add_all(posts)
db.add_all(reports)
db.add_all(billings)
db.commit()

print("Database seeded successfully!")
print(f"  - {len(clients)} clients")
print(f"  - {len(posts)} posts")
print(f"  - {len(reports)} reports")
print(f"  - {len(billings)} billings")

db.close()
