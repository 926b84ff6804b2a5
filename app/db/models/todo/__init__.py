# app/db/models/todo/__init__.py
from .project import Project
from .task import Task
from .todo import Todo
