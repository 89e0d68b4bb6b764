from app.db.base import Base, engine
from app.models import user, post, like

def init_db():
    Base.metadata.create_all(bind=engine)

if __name__ == "__main__":
    init_db()
