import unittest

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from fastapi import HTTPException

import models_bootstrap  # noqa: F401
from core.database import Base
from organization.models import Organization
from strategyplan.models import StrategyPlan
from user.models import User
from hrdevplan.schema import HrDevPlanCreatePayload
from hrdevplan import service as hr_plan_service
from hrdevinitiative.schema import HrDevInitiativeCreatePayload, HrDevInitiativeUpdate
from hrdevinitiative import service as hr_service
from digitaldevplan.schema import DigitalDevPlanCreatePayload
from digitaldevplan import service as digital_plan_service
from digitalinitiative.schema import DigitalInitiativeCreatePayload
from digitalinitiative import service as digital_service


class InitiativeServiceTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.engine = create_engine("sqlite+pysqlite:///:memory:", future=True)
        Base.metadata.create_all(cls.engine)
        cls.SessionLocal = sessionmaker(bind=cls.engine, autoflush=False, autocommit=False, future=True)

    def setUp(self):
        self.db = self.SessionLocal()
        org = Organization(org_name="Org")
        self.db.add(org)
        self.db.flush()
        sp = StrategyPlan(org_id=org.org_id, plan_name="SP")
        user = User(username="lead", password_hash="x", role="management")
        self.db.add_all([sp, user])
        self.db.commit()
        self.sp_id, self.user_id = sp.strategy_plan_id, user.id

    def tearDown(self):
        for tbl in reversed(Base.metadata.sorted_tables):
            self.db.execute(tbl.delete())
        self.db.commit()
        self.db.close()

    def test_hr_plan_requires_strategy_plan(self):
        with self.assertRaises(HTTPException) as ctx:
            hr_plan_service.create_hr_dev_plan(self.db, HrDevPlanCreatePayload(strategy_plan_id=99, plan_name="HR"))
        self.assertEqual(ctx.exception.status_code, 404)

    def test_hr_initiative_with_person(self):
        plan = hr_plan_service.create_hr_dev_plan(
            self.db, HrDevPlanCreatePayload(strategy_plan_id=self.sp_id, plan_name="HR")
        )
        init = hr_service.create_hr_dev_initiative(
            self.db,
            HrDevInitiativeCreatePayload(hr_plan_id=plan.hr_plan_id, initiative_name="Coaching",
                                         responsible_person_id=self.user_id, budget=1500.0),
        )
        self.assertEqual(init.status, "Not Started")
        self.assertEqual(init.progress, 0)

        updated = hr_service.update_hr_dev_initiative(
            self.db, init.hr_initiative_id, HrDevInitiativeUpdate(progress=75, status="In Progress")
        )
        self.assertEqual(updated.progress, 75)
        self.assertEqual(updated.initiative_name, "Coaching")

    def test_hr_initiative_missing_person_404(self):
        plan = hr_plan_service.create_hr_dev_plan(
            self.db, HrDevPlanCreatePayload(strategy_plan_id=self.sp_id, plan_name="HR")
        )
        with self.assertRaises(HTTPException) as ctx:
            hr_service.create_hr_dev_initiative(
                self.db,
                HrDevInitiativeCreatePayload(hr_plan_id=plan.hr_plan_id, initiative_name="x",
                                             responsible_person_id=999),
            )
        self.assertEqual(ctx.exception.detail, "Responsible person not found")

    def test_digital_initiative_requires_digital_plan(self):
        with self.assertRaises(HTTPException) as ctx:
            digital_service.create_digital_initiative(
                self.db, DigitalInitiativeCreatePayload(digital_plan_id=5, initiative_name="ERP")
            )
        self.assertEqual(ctx.exception.status_code, 404)

        plan = digital_plan_service.create_digital_dev_plan(
            self.db, DigitalDevPlanCreatePayload(strategy_plan_id=self.sp_id, plan_name="Digital")
        )
        init = digital_service.create_digital_initiative(
            self.db, DigitalInitiativeCreatePayload(digital_plan_id=plan.digital_plan_id,
                                                    initiative_name="ERP", technology_stack="Python")
        )
        self.assertEqual(init.technology_stack, "Python")
        self.assertEqual(plan.status, "Draft")
