"""Shared constants for prompt construction."""

from __future__ import annotations

APP_TYPES: tuple[str, ...] = ("web", "mobile")

APP_DESCRIPTIONS: dict[str, str] = {
    "web": "Next.js web application",
    "mobile": "Flutter mobile application",
}

BASE_REQUIREMENTS: dict[str, tuple[str, ...]] = {
    "web": (
        "Use Next.js 14 with App Router",
        "Use TypeScript for type safety",
        "Use Tailwind CSS for styling",
        "Implement responsive design for mobile, tablet, and desktop",
        "Follow React best practices and hooks patterns",
        "Include proper error handling and loading states",
        "Add meaningful comments and documentation",
        "Use modern ES6+ JavaScript features",
        "Implement SEO best practices with proper meta tags",
        "Ensure accessibility with proper ARIA labels",
        "Structure components in a modular, reusable way",
    ),
    "mobile": (
        "Use Flutter with latest stable version",
        "Implement Material Design 3 principles",
        "Create responsive layouts for different screen sizes",
        "Use proper state management (Provider or Riverpod)",
        "Implement proper navigation patterns",
        "Add error handling and loading states",
        "Include comprehensive comments",
        "Follow Flutter best practices and conventions",
        "Implement platform-specific designs for iOS and Android",
        "Use async/await for asynchronous operations",
    ),
}

BACKEND_REQUIREMENTS: tuple[str, ...] = (
    "Integrate Firebase for backend services",
    "Implement Firebase Authentication with email/password and Google Sign-In",
    "Use Firestore for database with proper security rules",
    "Implement Firebase Storage for file uploads if needed",
    "Add proper error handling for all Firebase operations",
    "Include offline persistence support",
    "Implement proper data validation",
)

STRUCTURE_REQUIREMENTS: tuple[str, ...] = (
    "Organize code in a clean, scalable folder structure",
    "Separate concerns (components, utils, services, types)",
    "Include all necessary configuration files",
)

OUTPUT_REQUIREMENTS: tuple[str, ...] = (
    "Provide complete, production-ready code",
    "Include all necessary files for a working application",
    "No placeholders or TODO comments - implement all features",
    "Include package.json with all dependencies",
)

SYSTEM_PROMPT = (
    "You are an expert software developer. Generate complete, production-ready code "
    "based on the requirements. Format your response with code blocks using triple "
    "backticks and include the filename at the start of each code block."
)

FORMAT_RULES = """IMPORTANT RULES:
1. Format each code block with the filename on the first line after the backticks
2. Use this format: ```filename.ext
3. For package.json, provide valid JSON without any comments
4. Include proper file paths like: app/page.tsx, components/Header.tsx, etc.
5. Make sure all code is complete and functional

Example format:
```package.json
{
  "name": "app",
  "version": "1.0.0"
}
```

```app/page.tsx
export default function Page() {
  return <div>Hello</div>
}
```"""


__all__ = [
    "APP_DESCRIPTIONS",
    "APP_TYPES",
    "BACKEND_REQUIREMENTS",
    "BASE_REQUIREMENTS",
    "FORMAT_RULES",
    "OUTPUT_REQUIREMENTS",
    "STRUCTURE_REQUIREMENTS",
    "SYSTEM_PROMPT",
]
