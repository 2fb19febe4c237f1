import unittest
from datetime import timedelta

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from fastapi import HTTPException

import models_bootstrap  # noqa: F401
from auth.services import auth_service
from auth.utils.auth_utils import create_access_token, decode_access_token
from core.database import Base
from core.initial_data import seed_admin_user


class AuthServiceTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.engine = create_engine("sqlite+pysqlite:///:memory:", future=True)
        Base.metadata.create_all(cls.engine)
        cls.SessionLocal = sessionmaker(bind=cls.engine, autoflush=False, autocommit=False, future=True)

    def setUp(self):
        self.db = self.SessionLocal()
        self.admin = seed_admin_user(self.db)

    def tearDown(self):
        for tbl in reversed(Base.metadata.sorted_tables):
            self.db.execute(tbl.delete())
        self.db.commit()
        self.db.close()

    def test_default_admin_login(self):
        user, token = auth_service.login(self.db, "admin", "123456")
        self.assertEqual(user.role, "admin")
        resolved = auth_service.resolve_token(self.db, token)
        self.assertEqual(resolved.id, self.admin.id)
        self.assertEqual(decode_access_token(token)["sub"], str(self.admin.id))

    def test_wrong_password_and_unknown_user_both_401(self):
        for username, password in (("admin", "nope"), ("ghost", "123456")):
            with self.assertRaises(HTTPException) as ctx:
                auth_service.authenticate(self.db, username, password)
            self.assertEqual(ctx.exception.status_code, 401)
            self.assertEqual(ctx.exception.detail, "Invalid credentials")

    def test_expired_token(self):
        token = create_access_token(self.admin.id, expires_delta=timedelta(seconds=-5))
        with self.assertRaises(HTTPException) as ctx:
            auth_service.resolve_token(self.db, token)
        self.assertEqual(ctx.exception.detail, "Not authorized, token failed")

    def test_garbage_token(self):
        with self.assertRaises(HTTPException) as ctx:
            auth_service.resolve_token(self.db, "not-a-jwt")
        self.assertEqual(ctx.exception.status_code, 401)

    def test_token_for_deleted_user(self):
        token = create_access_token(424242)
        with self.assertRaises(HTTPException) as ctx:
            auth_service.resolve_token(self.db, token)
        self.assertEqual(ctx.exception.detail, "User not found")
