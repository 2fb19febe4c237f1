import unittest
from datetime import datetime

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from fastapi import HTTPException

import models_bootstrap  # noqa: F401
from core.database import Base
from organization.models import Organization
from organization.service import list_organizations, get_organization, create_organization, update_organization, delete_organization

from organization.schema import OrganizationCreatePayload, OrganizationUpdate


class OrganizationServiceTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        # In-memory SQLite for speed & isolation
        cls.engine = create_engine("sqlite+pysqlite:///:memory:", future=True)
        Base.metadata.create_all(cls.engine)
        cls.SessionLocal = sessionmaker(bind=cls.engine, autoflush=False, autocommit=False, future=True)

    def setUp(self):
        self.db = self.SessionLocal()

    def tearDown(self):
        # Clean tables between tests
        for tbl in reversed(Base.metadata.sorted_tables):
            self.db.execute(tbl.delete())
        self.db.commit()
        self.db.close()

    # ---------- Helpers ----------
    def _seed(self, name="Org A", vision="Grow"):
        org = Organization(org_name=name, vision=vision)
        self.db.add(org)
        self.db.commit()
        self.db.refresh(org)
        return org

    # ---------- Tests ----------
    def test_create_ok(self):
        obj = create_organization(self.db, OrganizationCreatePayload(org_name="Coffee Co", mission="Brew"))
        self.assertIsInstance(obj.org_id, int)
        self.assertEqual(obj.org_name, "Coffee Co")
        self.assertEqual(obj.mission, "Brew")
        self.assertIsNotNone(obj.created_at)

    def test_get_organization(self):
        org = self._seed(name="Target")
        got = get_organization(self.db, org.org_id)
        self.assertEqual(got.org_name, "Target")

    def test_get_missing_404(self):
        with self.assertRaises(HTTPException) as ctx:
            get_organization(self.db, 999)
        self.assertEqual(ctx.exception.status_code, 404)
        self.assertEqual(ctx.exception.detail, "Organization not found")

    def test_list_in_insert_order(self):
        self._seed(name="Zeta")
        self._seed(name="Alpha")
        names = [o.org_name for o in list_organizations(self.db)]
        self.assertEqual(names, ["Zeta", "Alpha"])

    def test_update_ok(self):
        org = self._seed(name="Old")
        updated = update_organization(self.db, org.org_id, OrganizationUpdate(org_name="New"))
        self.assertEqual(updated.org_name, "New")
        self.assertEqual(updated.vision, "Grow")

    def test_empty_update_keeps_fields(self):
        org = self._seed(name="Same", vision="Keep")
        updated = update_organization(self.db, org.org_id, OrganizationUpdate())
        self.assertEqual(updated.org_name, "Same")
        self.assertEqual(updated.vision, "Keep")
        self.assertIsNotNone(updated.updated_at)

    def test_empty_update_moves_updated_at_only(self):
        org = self._seed(name="Same", vision="Keep")
        org.mission = "M"
        org.updated_at = datetime(2000, 1, 1)
        self.db.commit()
        self.db.refresh(org)
        before_created = org.created_at

        updated = update_organization(self.db, org.org_id, OrganizationUpdate())
        self.assertGreater(updated.updated_at, datetime(2000, 1, 1))
        self.assertEqual(updated.org_name, "Same")
        self.assertEqual(updated.vision, "Keep")
        self.assertEqual(updated.mission, "M")
        self.assertEqual(updated.created_at, before_created)

    def test_update_can_clear_optional_field(self):
        org = self._seed(vision="Old vision")
        updated = update_organization(self.db, org.org_id, OrganizationUpdate(vision=""))
        self.assertEqual(updated.vision, "")

    def test_update_null_name_400(self):
        org = self._seed()
        with self.assertRaises(HTTPException) as ctx:
            update_organization(self.db, org.org_id, OrganizationUpdate(org_name=None))
        self.assertEqual(ctx.exception.status_code, 400)

    def test_update_not_found_404(self):
        with self.assertRaises(HTTPException) as ctx:
            update_organization(self.db, 999999, OrganizationUpdate(org_name="X"))
        self.assertEqual(ctx.exception.status_code, 404)

    def test_delete_ok(self):
        org = self._seed(name="DelMe")
        delete_organization(self.db, org.org_id)
        with self.assertRaises(HTTPException):
            get_organization(self.db, org.org_id)

    def test_delete_missing_404(self):
        with self.assertRaises(HTTPException) as ctx:
            delete_organization(self.db, 424242)
        self.assertEqual(ctx.exception.status_code, 404)
