# studiofolio/ui/scripts.py
"""
Browser-side glue.

The page script reports viewport intersections of elements carrying a
`data-observe` attribute as `studio_intersection` events; the Python
controllers decide what to do with them. Scrolling is requested with small
JS snippets.
"""

import json

INTERSECTION_EVENT = "studio_intersection"

# One IntersectionObserver per (threshold, rootMargin) pair. A MutationObserver
# picks up elements added by refreshable re-renders.
INTERSECTION_BRIDGE_JS = """
<script>
(() => {
  if (window.__studioObserverInstalled) return;
  window.__studioObserverInstalled = true;
  const observers = new Map();
  const observerFor = (threshold, rootMargin) => {
    const key = threshold + '|' + rootMargin;
    if (!observers.has(key)) {
      observers.set(key, new IntersectionObserver((entries) => {
        for (const entry of entries) {
          emitEvent('%(event)s', {
            id: entry.target.dataset.observe,
            ratio: entry.intersectionRatio,
            intersecting: entry.isIntersecting,
          });
        }
      }, {threshold: threshold, rootMargin: rootMargin}));
    }
    return observers.get(key);
  };
  const watch = (el) => {
    if (el.__studioObserved) return;
    el.__studioObserved = true;
    const threshold = parseFloat(el.dataset.threshold || '0.1');
    const rootMargin = el.dataset.rootMargin || '0px';
    observerFor(threshold, rootMargin).observe(el);
  };
  const scan = (root) => {
    if (root.nodeType !== 1) return;
    if (root.dataset && root.dataset.observe) watch(root);
    root.querySelectorAll('[data-observe]').forEach(watch);
  };
  const start = () => {
    scan(document.body);
    new MutationObserver((mutations) => {
      for (const m of mutations) m.addedNodes.forEach(scan);
    }).observe(document.body, {childList: true, subtree: true});
  };
  if (document.readyState === 'loading') {
    document.addEventListener('DOMContentLoaded', start);
  } else {
    start();
  }
})();
</script>
""" % {"event": INTERSECTION_EVENT}


def scroll_to_section_js(section_id: str) -> str:
    target = json.dumps(section_id)
    return (
        f"(() => {{ const el = document.getElementById({target}); "
        f"if (el) el.scrollIntoView({{behavior: 'smooth'}}); }})()"
    )


def scroll_to_top_js(smooth: bool = False) -> str:
    behavior = "smooth" if smooth else "auto"
    return f"window.scrollTo({{top: 0, behavior: '{behavior}'}})"


def observe_props(target: str, threshold: float, root_margin: str = "0px") -> str:
    """Quasar props string marking an element for the intersection bridge"""
    return f'data-observe="{target}" data-threshold="{threshold}" data-root-margin="{root_margin}"'
