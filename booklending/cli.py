"""Small maintenance utilities: create tables, seed sample data, run the API."""
import argparse
import logging

import uvicorn

from booklending.core import config
from booklending.core.database import Base, SessionLocal, engine
from booklending.models import models

logger = logging.getLogger(__name__)


def seed(db):
    # idempotent: only fills empty tables
    if db.query(models.User).count() == 0:
        db.add_all([
            models.User(user_name='Alice'),
            models.User(user_name='Bob'),
        ])
    if db.query(models.Book).count() == 0:
        db.add_all([
            models.Book(title='Data Engineering with Python', author='J. Reader'),
            models.Book(title='Designing Data-Intensive Applications', author='Martin Kleppmann'),
        ])
    db.commit()
    logger.info('Seeded sample data')


def main(argv=None):
    parser = argparse.ArgumentParser(description='Book lending small utilities')
    parser.add_argument('--initdb', action='store_true', help='Create tables')
    parser.add_argument('--seed', action='store_true', help='Seed sample data')
    parser.add_argument('--serve', action='store_true', help='Run the HTTP API')
    args = parser.parse_args(argv)

    config.configure_logging()
    Base.metadata.create_all(bind=engine)
    if args.seed:
        db = SessionLocal()
        try:
            seed(db)
        finally:
            db.close()
    if args.serve:
        uvicorn.run("booklending.main:app", host=config.HOST, port=config.PORT,
                    log_level=config.LOG_LEVEL.lower())
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
