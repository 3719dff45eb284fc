"""Source templates for the synthetic corpus.

Each template is a pure ``(index) -> text`` function. Every top-level symbol
carries the index so files never collide with each other.
"""

from __future__ import annotations

from typing import Callable, Tuple

Template = Callable[[int], str]


_REACT_COMPONENT = """
import React, { useState, useEffect } from 'react';

interface User%(index)d {
  id: number;
  name: string;
  email: string;
  posts: Post%(index)d[];
}

interface Post%(index)d {
  id: number;
  title: string;
  content: string;
  author: User%(index)d;
  tags: string[];
}

const UserCard%(index)d: React.FC<{ user: User%(index)d }> = ({ user }) => {
  const [isLoading, setIsLoading] = useState<boolean>(false);
  const [posts, setPosts] = useState<Post%(index)d[]>([]);

  useEffect(() => {
    const fetchPosts = async () => {
      setIsLoading(true);
      try {
        const response = await fetch(`/api/users/${user.id}/posts`);
        const data: Post%(index)d[] = await response.json();
        setPosts(data);
      } catch (error) {
        console.error('Failed to fetch posts:', error);
      } finally {
        setIsLoading(false);
      }
    };

    fetchPosts();
  }, [user.id]);

  const handlePostClick = (post: Post%(index)d) => {
    console.log(`Clicked post: ${post.title}`);
  };

  return (
    <div className="user-card">
      <h2>{user.name}</h2>
      <p>{user.email}</p>
      {isLoading ? (
        <div>Loading posts...</div>
      ) : (
        <div>
          {posts.map((post) => (
            <div key={post.id} onClick={() => handlePostClick(post)}>
              <h3>{post.title}</h3>
              <p>{post.content}</p>
              <div>
                {post.tags.map((tag) => (
                  <span key={tag} className="tag">{tag}</span>
                ))}
              </div>
            </div>
          ))}
        </div>
      )}
    </div>
  );
};

export default UserCard%(index)d;
"""


_DATA_SERVICE = """
export class DataService%(index)d<T> {
  private cache: Map<string, T> = new Map();
  private readonly apiUrl: string;

  constructor(apiUrl: string) {
    this.apiUrl = apiUrl;
  }

  async get<K extends keyof T>(id: string): Promise<T | null> {
    if (this.cache.has(id)) {
      return this.cache.get(id)!;
    }

    try {
      const response = await fetch(`${this.apiUrl}/${id}`);
      if (!response.ok) {
        throw new Error(`HTTP error! status: ${response.status}`);
      }

      const data: T = await response.json();
      this.cache.set(id, data);
      return data;
    } catch (error) {
      console.error(`Failed to fetch data for id ${id}:`, error);
      return null;
    }
  }

  async getAll(): Promise<T[]> {
    try {
      const response = await fetch(this.apiUrl);
      const data: T[] = await response.json();

      data.forEach((item: any) => {
        if (item.id) {
          this.cache.set(item.id, item);
        }
      });

      return data;
    } catch (error) {
      console.error('Failed to fetch all data:', error);
      return [];
    }
  }

  async create(data: Omit<T, 'id'>): Promise<T | null> {
    try {
      const response = await fetch(this.apiUrl, {
        method: 'POST',
        headers: {
          'Content-Type': 'application/json',
        },
        body: JSON.stringify(data),
      });

      if (!response.ok) {
        throw new Error(`HTTP error! status: ${response.status}`);
      }

      const newItem: T = await response.json();
      if ((newItem as any).id) {
        this.cache.set((newItem as any).id, newItem);
      }

      return newItem;
    } catch (error) {
      console.error('Failed to create data:', error);
      return null;
    }
  }

  clearCache(): void {
    this.cache.clear();
  }

  getCacheSize(): number {
    return this.cache.size;
  }
}

export const userService%(index)d = new DataService%(index)d<{
  id: string;
  name: string;
  email: string;
}>('/api/users');
"""


_UTILITIES = """
export interface Config%(index)d {
  apiUrl: string;
  timeout: number;
  retries: number;
  enableCache: boolean;
}

export type DeepPartial%(index)d<T> = {
  [P in keyof T]?: T[P] extends object ? DeepPartial%(index)d<T[P]> : T[P];
};

export const defaultConfig%(index)d: Config%(index)d = {
  apiUrl: 'https://api.example.com',
  timeout: 5000,
  retries: 3,
  enableCache: true,
};

export function mergeConfig%(index)d<T extends Config%(index)d>(
  base: T,
  override: DeepPartial%(index)d<T>
): T {
  const result = { ...base };

  for (const key in override) {
    if (override[key] !== undefined) {
      if (typeof override[key] === 'object' && override[key] !== null) {
        result[key] = mergeConfig%(index)d(
          result[key] as any,
          override[key] as any
        );
      } else {
        (result as any)[key] = override[key];
      }
    }
  }

  return result;
}

export async function retry%(index)d<T>(
  fn: () => Promise<T>,
  maxRetries: number = 3,
  delay: number = 1000
): Promise<T> {
  let lastError: Error;

  for (let attempt = 1; attempt <= maxRetries; attempt++) {
    try {
      return await fn();
    } catch (error) {
      lastError = error as Error;

      if (attempt === maxRetries) {
        break;
      }

      await new Promise(resolve => setTimeout(resolve, delay * attempt));
    }
  }

  throw lastError!;
}

export function debounce%(index)d<T extends (...args: any[]) => any>(
  func: T,
  wait: number
): (...args: Parameters<T>) => void {
  let timeout: NodeJS.Timeout | null = null;

  return (...args: Parameters<T>) => {
    if (timeout) {
      clearTimeout(timeout);
    }

    timeout = setTimeout(() => {
      func(...args);
    }, wait);
  };
}

export class EventEmitter%(index)d<T extends Record<string, any[]>> {
  private listeners: { [K in keyof T]?: ((...args: T[K]) => void)[] } = {};

  on<K extends keyof T>(event: K, listener: (...args: T[K]) => void): void {
    if (!this.listeners[event]) {
      this.listeners[event] = [];
    }
    this.listeners[event]!.push(listener);
  }

  emit<K extends keyof T>(event: K, ...args: T[K]): void {
    const eventListeners = this.listeners[event];
    if (eventListeners) {
      eventListeners.forEach(listener => listener(...args));
    }
  }

  off<K extends keyof T>(event: K, listener: (...args: T[K]) => void): void {
    const eventListeners = this.listeners[event];
    if (eventListeners) {
      const index = eventListeners.indexOf(listener);
      if (index > -1) {
        eventListeners.splice(index, 1);
      }
    }
  }
}
"""


def react_component(index: int) -> str:
    return _REACT_COMPONENT % {"index": int(index)}


def data_service(index: int) -> str:
    return _DATA_SERVICE % {"index": int(index)}


def utilities(index: int) -> str:
    return _UTILITIES % {"index": int(index)}


DEFAULT_TEMPLATES: Tuple[Template, ...] = (react_component, data_service, utilities)


def template_name(template: Template) -> str:
    return getattr(template, "__name__", repr(template))
