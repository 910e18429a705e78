"""Offline provider returning a canned completion, for demos and tests."""

from __future__ import annotations

MOCK_COMPLETION = '''Here is your generated application.

```package.json
{
  "name": "generated-app",
  "version": "1.0.0",
  "scripts": {
    "dev": "next dev",
    "build": "next build",
    "start": "next start",
    "lint": "next lint"
  },
  "dependencies": {
    "next": "^14.0.0",
    "react": "^18.0.0",
    "react-dom": "^18.0.0",
    "typescript": "^5.0.0"
  },
  "devDependencies": {
    "@types/node": "^20.0.0",
    "@types/react": "^18.0.0",
    "@types/react-dom": "^18.0.0",
    "tailwindcss": "^3.3.0",
    "postcss": "^8.4.31",
    "autoprefixer": "^10.4.16"
  }
}
```

```app/page.tsx
export default function Home() {
  return (
    <main className="flex min-h-screen flex-col items-center justify-center p-24">
      <div className="z-10 max-w-5xl w-full items-center justify-between font-mono text-sm">
        <h1 className="text-4xl font-bold text-center mb-8">
          Generated App
        </h1>
        <p className="text-center text-gray-600">
          This is your AI-generated application
        </p>
      </div>
    </main>
  );
}
```
'''


class MockProvider:
    """Ignores the prompt and returns :data:`MOCK_COMPLETION`."""

    name = "mock"

    def __init__(self, completion: str = MOCK_COMPLETION) -> None:
        self.completion = completion
        self.prompts: list[str] = []

    def submit(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.completion


__all__ = ["MOCK_COMPLETION", "MockProvider"]
