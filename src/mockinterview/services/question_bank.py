"""Default interview question bank and startup seeding."""

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from mockinterview.repositories.question import QuestionRepository

# (text, category, difficulty)
DEFAULT_QUESTIONS: tuple[tuple[str, str, str], ...] = (
    ("What is the difference between an array and a linked list?", "DSA", "easy"),
    ("Explain how a stack works and give one real use case.", "DSA", "easy"),
    ("How does binary search work and what is its time complexity?", "DSA", "medium"),
    ("Explain how a hash map handles collisions.", "DSA", "medium"),
    ("Explain time complexity of quicksort", "DSA", "hard"),
    ("How would you detect a cycle in a directed graph?", "DSA", "hard"),
    ("What is the difference between HTML and CSS?", "Web Development", "easy"),
    ("What does the HTTP status code 404 mean?", "Web Development", "easy"),
    ("Explain the event loop in JavaScript.", "Web Development", "medium"),
    ("What is the difference between cookies and local storage?", "Web Development", "medium"),
    ("How would you optimize the loading performance of a large web application?", "Web Development", "hard"),
    ("Explain how cross-origin resource sharing works and how to secure it.", "Web Development", "hard"),
    ("What is the difference between JDK, JRE and JVM?", "Java", "easy"),
    ("What are the four principles of object-oriented programming?", "Java", "easy"),
    ("Explain the difference between an interface and an abstract class.", "Java", "medium"),
    ("How does garbage collection work in Java?", "Java", "medium"),
    ("Explain the Java memory model and the volatile keyword.", "Java", "hard"),
    ("How does ConcurrentHashMap achieve thread safety?", "Java", "hard"),
    ("What is the difference between horizontal and vertical scaling?", "System Design", "easy"),
    ("What is a load balancer and why is it used?", "System Design", "easy"),
    ("How would you design a URL shortening service?", "System Design", "medium"),
    ("Explain caching strategies and cache invalidation.", "System Design", "medium"),
    ("Design a distributed rate limiter for a public API.", "System Design", "hard"),
    ("How would you design a globally replicated database with strong consistency?", "System Design", "hard"),
    ("Tell me about yourself.", "HR", "easy"),
    ("Why do you want to join our company?", "HR", "easy"),
    ("Describe a time you resolved a conflict within your team.", "HR", "medium"),
    ("Where do you see yourself in five years?", "HR", "medium"),
    ("Describe a project that failed and what you learned from it.", "HR", "hard"),
    ("Tell me about a time you had to make a decision with incomplete information.", "HR", "hard"),
)


async def seed_question_bank(session: AsyncSession) -> int:
    """Insert the default questions when the bank is empty.

    Returns:
        Number of questions inserted
    """
    existing = await QuestionRepository.count(session)
    if existing:
        logger.info("Question bank already populated", question_count=existing)
        return 0

    questions = await QuestionRepository.create_bulk(session, list(DEFAULT_QUESTIONS))
    await session.commit()
    logger.info("Question bank seeded", question_count=len(questions))
    return len(questions)
