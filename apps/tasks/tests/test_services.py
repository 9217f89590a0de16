"""
Unit tests for the task service: ownership and existence rules.
"""
from django.test import TestCase

from apps.core.exceptions import Forbidden, NotFound
from apps.tasks.dtos import TaskIn
from apps.tasks.models import Task
from apps.tasks.repositories import TaskStore
from apps.tasks.services import TaskService
from apps.users.hashing import PasswordHasher
from apps.users.models import User
from apps.users.repositories import UserStore
from apps.users.services import UserService


class TaskServiceTest(TestCase):
    def setUp(self):
        users = UserService(UserStore(), PasswordHasher())
        self.service = TaskService(TaskStore(), users)

        # Stored directly so ids are predictable and no hashing is needed
        self.owner = User.objects.create(
            id=7, email="owner@test.com", password="x", first_name="O", last_name="W",
        )
        self.other = User.objects.create(
            id=8, email="other@test.com", password="x", first_name="T", last_name="H",
        )
        self.payload = TaskIn(title="Buy milk", description="2%  and whole")

    def test_create_binds_owner(self):
        task = self.service.create(self.owner.id, self.payload)
        self.assertIsNotNone(task.id)
        self.assertEqual(task.user_id, 7)
        self.assertEqual(task.title, "Buy milk")
        self.assertEqual(task.description, "2%  and whole")

    def test_create_for_missing_owner(self):
        with self.assertRaises(NotFound):
            self.service.create(999, self.payload)
        self.assertEqual(Task.objects.count(), 0)

    def test_find_all_is_scoped_to_owner(self):
        task = self.service.create(7, self.payload)

        self.assertEqual([t.id for t in self.service.find_all(7)], [task.id])
        self.assertEqual(self.service.find_all(8), [])

    def test_find_one_by_owner(self):
        task = self.service.create(7, self.payload)
        found = self.service.find_one(task.id, 7)
        self.assertEqual(found.id, task.id)

    def test_repeated_reads_are_equal(self):
        task = self.service.create(7, self.payload)
        first = self.service.find_one(task.id, 7)
        second = self.service.find_one(task.id, 7)
        self.assertEqual(
            (first.id, first.title, first.description, first.user_id),
            (second.id, second.title, second.description, second.user_id),
        )

    def test_find_one_other_owner_is_forbidden(self):
        task = self.service.create(7, self.payload)
        with self.assertRaises(Forbidden):
            self.service.find_one(task.id, 8)

    def test_find_one_missing_is_not_found_for_any_caller(self):
        for caller in (7, 8, 999):
            with self.subTest(caller=caller):
                with self.assertRaises(NotFound) as ctx:
                    self.service.find_one(12345, caller)
                self.assertEqual(str(ctx.exception), "Task #12345 not found")

    def test_remove(self):
        task = self.service.create(7, self.payload)
        removed = self.service.remove(task.id, 7)
        self.assertEqual(removed.id, task.id)
        self.assertEqual(removed.title, "Buy milk")
        self.assertFalse(Task.objects.filter(id=task.id).exists())

    def test_remove_by_other_owner_keeps_task(self):
        task = self.service.create(7, self.payload)
        with self.assertRaises(Forbidden):
            self.service.remove(task.id, 8)
        self.assertTrue(Task.objects.filter(id=task.id).exists())

    def test_remove_missing(self):
        with self.assertRaises(NotFound):
            self.service.remove(12345, 7)

    def test_deleting_owner_deletes_tasks(self):
        self.service.create(7, self.payload)
        self.owner.delete()
        self.assertEqual(Task.objects.count(), 0)
