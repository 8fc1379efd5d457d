import logging

from django.shortcuts import render
from django.views.decorators.http import require_GET

from .data import get_all

logger = logging.getLogger(__name__)


@require_GET
def index(request):
    projects = get_all()
    logger.debug("rendering %d projects", len(projects))
    return render(request, "home/index.html", {"projects": projects})
