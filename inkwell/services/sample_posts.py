"""Built-in sample posts used when no content directory is configured."""

from __future__ import annotations

from datetime import date

from inkwell.schemas.post import Post

_SAMPLE_POSTS: tuple[dict[str, object], ...] = (
    {
        "id": "1",
        "title": "Getting Started with Modern Web Development",
        "slug": "getting-started-modern-web-development",
        "excerpt": (
            "Learn the fundamentals of modern web development with React, TypeScript, and the "
            "latest tools that will make you a more productive developer."
        ),
        "content": (
            "# Getting Started with Modern Web Development\n\n"
            "Modern web development has evolved significantly..."
        ),
        "author": "John Doe",
        "category": "Web Development",
        "tags": ("React", "TypeScript", "Tutorial"),
        "published_at": date(2024, 1, 15),
        "updated_at": date(2024, 1, 15),
        "read_time": 8,
        "featured": True,
    },
    {
        "id": "2",
        "title": "The Power of TypeScript in Large Applications",
        "slug": "power-of-typescript-large-applications",
        "excerpt": (
            "Discover how TypeScript can improve your development experience and help you build "
            "more maintainable applications at scale."
        ),
        "content": "# The Power of TypeScript\n\nTypeScript has become essential...",
        "author": "Jane Smith",
        "category": "Programming",
        "tags": ("TypeScript", "JavaScript", "Best Practices"),
        "published_at": date(2024, 1, 12),
        "updated_at": date(2024, 1, 12),
        "read_time": 12,
    },
    {
        "id": "3",
        "title": "Building Responsive UIs with Tailwind CSS",
        "slug": "building-responsive-uis-tailwind-css",
        "excerpt": (
            "Master the art of creating beautiful, responsive user interfaces using Tailwind CSS "
            "utility classes and design system principles."
        ),
        "content": "# Building Responsive UIs\n\nTailwind CSS revolutionizes...",
        "author": "Mike Johnson",
        "category": "Design",
        "tags": ("Tailwind CSS", "UI/UX", "Responsive Design"),
        "published_at": date(2024, 1, 10),
        "updated_at": date(2024, 1, 10),
        "read_time": 6,
    },
    {
        "id": "4",
        "title": "Advanced React Patterns and Performance",
        "slug": "advanced-react-patterns-performance",
        "excerpt": (
            "Explore advanced React patterns, hooks, and performance optimization techniques to "
            "build lightning-fast applications."
        ),
        "content": "# Advanced React Patterns\n\nReact performance optimization...",
        "author": "Sarah Wilson",
        "category": "React",
        "tags": ("React", "Performance", "Hooks"),
        "published_at": date(2024, 1, 8),
        "updated_at": date(2024, 1, 8),
        "read_time": 15,
        "featured": True,
    },
    {
        "id": "5",
        "title": "State Management in Modern React Apps",
        "slug": "state-management-modern-react-apps",
        "excerpt": (
            "Compare different state management solutions for React applications and learn when "
            "to use each approach."
        ),
        "content": "# State Management\n\nChoosing the right state management...",
        "author": "David Brown",
        "category": "React",
        "tags": ("React", "State Management", "Zustand"),
        "published_at": date(2024, 1, 5),
        "updated_at": date(2024, 1, 5),
        "read_time": 10,
    },
)


def sample_posts() -> list[Post]:
    """Return fresh copies of the sample posts, newest first."""
    return [Post.model_validate(data) for data in _SAMPLE_POSTS]
