# init_db.py

from app.db.session import init_db, engine


def init():
    print("Connecting to database...")
    print("Creating tables (if not exist)...")
    init_db(engine)
    print("✅ Done.")


if __name__ == "__main__":
    init()
