"""Database models."""

from db import Base

# Import all models so create_all sees every table
from models.client import Client
from models.human_resource import HumanResource
from models.project import Project
from models.project_resource import ProjectResource
from models.project_role import ProjectRole
from models.milestone import Milestone
from models.task import Task
from models.cost import Cost

__all__ = [
    "Base",
    "Client",
    "HumanResource",
    "Project",
    "ProjectResource",
    "ProjectRole",
    "Milestone",
    "Task",
    "Cost",
]
