"""
Default modules and the routine that loads them into an empty store.
"""
from typing import List
from ..schemas import Module, ModuleContent, ModuleCreate
from .module_service import ModuleService
import logging

logger = logging.getLogger(__name__)

DEFAULT_MODULES: List[ModuleCreate] = [
    ModuleCreate(
        prompt="Please summarize the following text into clear, concise bullet points highlighting the main ideas and key information:",
        en=ModuleContent(
            name="Text Summarizer",
            description="Summarize long text content into key points",
            input_placeholder="Enter the text you want to summarize...",
        ),
        kn=ModuleContent(
            name="ಪಠ್ಯ ಸಾರಾಂಶ",
            description="ದೀರ್ಘ ಪಠ್ಯ ವಿಷಯವನ್ನು ಪ್ರಮುಖ ಅಂಶಗಳಾಗಿ ಸಾರಾಂಶಗೊಳಿಸಿ",
            input_placeholder="ನೀವು ಸಾರಾಂಶ ಮಾಡಲು ಬಯಸುವ ಪಠ್ಯವನ್ನು ನಮೂದಿಸಿ...",
        ),
    ),
    ModuleCreate(
        prompt="Write a professional email based on the following requirements. Make it clear, polite, and well-structured:",
        en=ModuleContent(
            name="Email Writer",
            description="Generate professional emails from brief descriptions",
            input_placeholder="Describe the email you need (purpose, recipient, tone, key points)...",
        ),
        kn=ModuleContent(
            name="ಇಮೇಲ್ ರಚನೆಕಾರ",
            description="ಸಂಕ್ಷಿಪ್ತ ವಿವರಣೆಗಳಿಂದ ವೃತ್ತಿಪರ ಇಮೇಲ್‌ಗಳನ್ನು ರಚಿಸಿ",
            input_placeholder="ನಿಮಗೆ ಬೇಕಾದ ಇಮೇಲ್ ಅನ್ನು ವಿವರಿಸಿ (ಉದ್ದೇಶ, ಸ್ವೀಕರಿಸುವವರು, ಧ್ವನಿ, ಪ್ರಮುಖ ಅಂಶಗಳು)...",
        ),
    ),
    ModuleCreate(
        prompt="Analyze the following image and write a detailed description about it:",
        en=ModuleContent(
            name="Image Analysis",
            description="Analyze an image and generate a description",
            input_placeholder="Upload an image for analysis...",
        ),
        kn=ModuleContent(
            name="ಚಿತ್ರ ವಿಶ್ಲೇಷಣೆ",
            description="ಚಿತ್ರವನ್ನು ವಿಶ್ಲೇಷಿಸಿ ಮತ್ತು ವಿವರಣೆಯನ್ನು ರಚಿಸಿ",
            input_placeholder="ವಿಶ್ಲೇಷಣೆಗಾಗಿ ಚಿತ್ರವನ್ನು ಅಪ್‌ಲೋಡ್ ಮಾಡಿ...",
        ),
    ),
]


class SeedService:
    """Loads DEFAULT_MODULES into the store"""

    def __init__(self, module_service: ModuleService, defaults: List[ModuleCreate] = None):
        self.module_service = module_service
        self.defaults = DEFAULT_MODULES if defaults is None else defaults

    def is_empty(self) -> bool:
        """True when the store holds no modules"""
        return len(self.module_service.list_modules()) == 0

    def seed(self) -> List[Module]:
        """
        Create the default modules if the store is empty.

        Returns the created modules, or an empty list when the store already
        had data. Safe to call on every startup.
        """
        logger.info("Checking if database needs seeding...")
        if not self.is_empty():
            logger.info("Database already contains modules, skipping seeding")
            return []

        logger.info("Database is empty, seeding with default modules...")
        created = self._create_defaults()
        logger.info(f"Seeded database with {len(created)} modules")
        return created

    def force_seed(self) -> List[Module]:
        """Create the default modules without checking for existing data. Test setup only."""
        logger.warning("Force seeding database with default modules...")
        created = self._create_defaults()
        logger.info(f"Force seeded database with {len(created)} modules")
        return created

    def _create_defaults(self) -> List[Module]:
        # One at a time: ids follow list order and the first failure stops the run
        created = []
        for module_data in self.defaults:
            logger.info(f"Creating module: {module_data.en.name}")
            try:
                module = self.module_service.create_module(module_data)
            except Exception as e:
                logger.error(f"Failed to create module '{module_data.en.name}': {e}")
                raise
            created.append(module)
            logger.info(f"Created module with ID: {module.id}")
        return created
