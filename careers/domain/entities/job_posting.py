"""
JobPosting Entity - The single position advertised on the public page.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class JobPosting:
    """
    Job posting shown next to the application form.

    Attributes:
        title: Position title
        company: Hiring company
        location: Work location (applicants must relocate here)
        salary: Salary range as displayed
        employment_type: e.g. Full-time
        level: e.g. Entry Level
        description: Summary paragraph
        responsibilities: Bullet list of duties
        requirements: Bullet list of required skills
        website: Company website
    """

    title: str
    company: str
    location: str
    salary: str = ""
    employment_type: str = "Full-time"
    level: str = "Entry Level"
    description: str = ""
    responsibilities: tuple[str, ...] = field(default_factory=tuple)
    requirements: tuple[str, ...] = field(default_factory=tuple)
    website: str = ""

    def __post_init__(self) -> None:
        """Validate posting and freeze bullet lists."""
        if not self.title:
            raise ValueError("title is required")
        if not self.company:
            raise ValueError("company is required")
        if isinstance(self.responsibilities, list):
            object.__setattr__(self, "responsibilities", tuple(self.responsibilities))
        if isinstance(self.requirements, list):
            object.__setattr__(self, "requirements", tuple(self.requirements))

    @property
    def relocation_notice(self) -> str:
        """Text shown above the relocation confirmation."""
        return (
            f"This position is based in {self.location}. "
            "You must be willing to relocate to this location for employment."
        )

    @property
    def relocation_confirmation(self) -> str:
        """Label of the relocation checkbox."""
        return (
            f"I confirm that I am willing to relocate to {self.location} "
            "for this position."
        )

    @classmethod
    def junior_java_developer(
        cls,
        company: str,
        location: str,
        website: str = "",
        title: str = "Junior Java Developer",
    ) -> "JobPosting":
        """Build the Junior Java Developer posting."""
        return cls(
            title=title,
            company=company,
            location=location,
            salary="₹20,000 – ₹25,000/month",
            description=(
                f"We are looking for a passionate {title} to join our team. "
                "The ideal candidate should have a strong understanding of Core Java "
                "concepts, OOP principles, and application development layers "
                "(Controller, Service, DAO). You will work closely with our team to "
                "build, maintain, and integrate applications efficiently. "
                "Candidates must be willing to relocate for this role."
            ),
            responsibilities=(
                "Write clean, maintainable Java code following OOP principles",
                "Develop Controller, Service, and DAO layer classes",
                "Integrate different layers of the application seamlessly",
                "Collaborate with team members to design and implement new features",
                "Debug and troubleshoot issues in existing applications",
            ),
            requirements=(
                "Strong knowledge of Core Java and OOP concepts",
                "Understanding of class design, methods, and application architecture",
                "Ability to write and integrate Controller, Service, and DAO classes",
                "Good problem-solving and debugging skills",
                "Eagerness to learn and grow in a fast-paced environment",
            ),
            website=website,
        )
