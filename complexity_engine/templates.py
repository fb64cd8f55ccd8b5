"""
Example rewrites and educational text for complexity suggestions.

Static templates, shared read-only by every analysis. Only the recursion
templates take a parameter: the detected function name.
"""

from types import MappingProxyType


HASH_MAP_EXAMPLE = """// Instead of nested loops:
for (int i = 0; i < n; i++) {
    for (int j = 0; j < m; j++) {
        if (arr1[i] == arr2[j]) { /* found */ }
    }
}

// Use hash map:
unordered_set<int> hashSet(arr2, arr2 + m);
for (int i = 0; i < n; i++) {
    if (hashSet.find(arr1[i]) != hashSet.end()) {
        /* found in O(1) */
    }
}"""

MATRIX_EXAMPLE = """// Cache-friendly matrix traversal:
// Instead of column-major order:
for (int j = 0; j < cols; j++) {
    for (int i = 0; i < rows; i++) {
        process(matrix[i][j]);
    }
}

// Use row-major order:
for (int i = 0; i < rows; i++) {
    for (int j = 0; j < cols; j++) {
        process(matrix[i][j]);
    }
}"""

BINARY_SEARCH_EXAMPLE = """// Replace linear search:
for (int i = 0; i < n; i++) {
    if (arr[i] == target) return i;
}

// With binary search:
int left = 0, right = n - 1;
while (left <= right) {
    int mid = left + (right - left) / 2;
    if (arr[mid] == target) return mid;
    if (arr[mid] < target) left = mid + 1;
    else right = mid - 1;
}"""

STRING_BUILDER_EXAMPLE = """// Instead of string concatenation:
string result = "";
for (int i = 0; i < n; i++) {
    result += arr[i]; // O(n²) complexity
}

// Use StringBuilder or vector:
vector<string> parts;
for (int i = 0; i < n; i++) {
    parts.push_back(arr[i]);
}
string result = join(parts); // O(n) complexity"""

DEQUE_EXAMPLE = """// Instead of array front insertion:
vector<int> arr;
arr.insert(arr.begin(), value); // O(n)

// Use deque:
deque<int> dq;
dq.push_front(value); // O(1)"""

HASH_MAP_LOOKUP_EXAMPLE = """// Replace array lookup:
bool found = false;
for (int x : arr) {
    if (x == target) { found = true; break; }
}

// With hash map:
unordered_set<int> hashSet(arr.begin(), arr.end());
bool found = hashSet.count(target) > 0;"""

SET_EXAMPLE = """// Instead of array for unique elements:
vector<int> unique_arr;
for (int x : arr) {
    if (find(unique_arr.begin(), unique_arr.end(), x) == unique_arr.end()) {
        unique_arr.push_back(x);
    }
}

// Use set:
set<int> unique_set(arr.begin(), arr.end());"""

KMP_EXAMPLE = """// For repeated string matching, use KMP:
vector<int> computeLPS(string pattern) {
    int m = pattern.length();
    vector<int> lps(m, 0);
    int len = 0, i = 1;

    while (i < m) {
        if (pattern[i] == pattern[len]) {
            lps[i++] = ++len;
        } else if (len) {
            len = lps[len - 1];
        } else {
            lps[i++] = 0;
        }
    }
    return lps;
}"""

EFFICIENT_SORT_EXAMPLE = """// Instead of bubble sort O(n²):
for (int i = 0; i < n-1; i++) {
    for (int j = 0; j < n-i-1; j++) {
        if (arr[j] > arr[j+1]) {
            swap(arr[j], arr[j+1]);
        }
    }
}

// Use built-in sort O(n log n):
sort(arr.begin(), arr.end());"""

MERGE_SORT_EXAMPLE = """// Implement merge sort O(n log n):
void mergeSort(vector<int>& arr, int left, int right) {
    if (left < right) {
        int mid = left + (right - left) / 2;
        mergeSort(arr, left, mid);
        mergeSort(arr, mid + 1, right);
        merge(arr, left, mid, right);
    }
}"""

CHAR_ARRAY_EXAMPLE = """// Instead of string concatenation:
string result = "";
for (char c : chars) {
    result += c; // O(n²)
}

// Use character array:
vector<char> result;
for (char c : chars) {
    result.push_back(c); // O(n)
}
string final_result(result.begin(), result.end());"""

IN_PLACE_EXAMPLE = """// Instead of creating new array:
vector<int> doubled;
for (int x : arr) {
    doubled.push_back(x * 2);
}

// Modify in-place:
for (int& x : arr) {
    x *= 2;
}"""

SPACE_OPTIMIZATION_EXAMPLE = """// Space-optimized approach:
// Instead of O(n) extra space:
vector<int> temp(n);

// Use O(1) space with two pointers:
int left = 0, right = n - 1;
while (left < right) {
    // Process without extra space
    left++;
    right--;
}"""


EXAMPLES = MappingProxyType({
    "hash_map": HASH_MAP_EXAMPLE,
    "matrix": MATRIX_EXAMPLE,
    "binary_search": BINARY_SEARCH_EXAMPLE,
    "string_builder": STRING_BUILDER_EXAMPLE,
    "deque": DEQUE_EXAMPLE,
    "hash_map_lookup": HASH_MAP_LOOKUP_EXAMPLE,
    "set": SET_EXAMPLE,
    "kmp": KMP_EXAMPLE,
    "efficient_sort": EFFICIENT_SORT_EXAMPLE,
    "merge_sort": MERGE_SORT_EXAMPLE,
    "char_array": CHAR_ARRAY_EXAMPLE,
    "in_place": IN_PLACE_EXAMPLE,
    "space_optimization": SPACE_OPTIMIZATION_EXAMPLE,
})


def build_memoization_example(function_name: str) -> str:
    """
    Build the memoization rewrite for a recursive function.

    Args:
        function_name: Name extracted from the function header

    Returns:
        Example code string
    """
    return f"""// Add memoization:
unordered_map<int, int> memo;

int {function_name}(int n) {{
    if (memo.find(n) != memo.end()) {{
        return memo[n];
    }}
    if (n <= 1) return n;
    memo[n] = {function_name}(n-1) + {function_name}(n-2);
    return memo[n];
}}"""


def build_tail_recursion_example(function_name: str) -> str:
    """Build the accumulator-based tail recursion rewrite."""
    return f"""// Convert to tail recursion:
int {function_name}Helper(int n, int acc) {{
    if (n <= 1) return acc;
    return {function_name}Helper(n - 1, acc * n);
}}

int {function_name}(int n) {{
    return {function_name}Helper(n, 1);
}}"""


# Structural suggestion examples (detector)
NESTED_LOOP_HINT = "Use a hash map for O(1) lookups instead of nested loops for searching."
RECURSION_HINT = "Add a cache to store previously computed results."


# Educational concepts keyed by pattern kind: (concept, explanation, example)
PATTERN_CONCEPTS = MappingProxyType({
    "nested": (
        "Nested Loops",
        "Nested loops multiply time complexity. Two nested loops over n elements result in O(n²) complexity.",
        "for (int i = 0; i < n; i++) {\n  for (int j = 0; j < n; j++) {\n    // O(n²) operation\n  }\n}",
    ),
    "recursion": (
        "Recursion",
        "Recursive functions call themselves. Without optimization, they can have exponential complexity.",
        "int fibonacci(int n) {\n  if (n <= 1) return n;\n  return fibonacci(n-1) + fibonacci(n-2); // O(2^n)\n}",
    ),
})

BASELINE_CONCEPT = (
    "Big O Notation",
    "Big O describes how algorithm performance scales with input size. O(1) is constant, O(n) is linear, O(n²) is quadratic.",
    "O(1): array[index]\nO(n): linear search\nO(n²): nested loops\nO(log n): binary search",
)
